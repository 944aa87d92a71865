"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100
DEFAULT_PASSWORD_HASH_METHOD = "pbkdf2:sha256"
PASSWORD_SALT_LENGTH = 16
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

MSG_COMPANY_EXISTS = "Empresa já existente."
MSG_CPF_EXISTS = "CPF já existente."
MSG_EMAIL_EXISTS = "Email já existente."
