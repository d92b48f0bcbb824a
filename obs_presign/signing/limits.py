"""Предельные размеры строк подписи"""

MAX_KEY_SIZE = 1024
MAX_BUCKET_NAME_SIZE = 255
MAX_URLENCODED_KEY_SIZE = 3 * MAX_KEY_SIZE

# "/" + бакет + "/" + закодированный ключ
MAX_CANONICALIZED_RESOURCE_SIZE = 1 + MAX_BUCKET_NAME_SIZE + 1 + MAX_URLENCODED_KEY_SIZE
MAX_QUERY_STRING_SIZE = 1024
MAX_STRING_TO_SIGN_SIZE = 4096
MAX_TEMP_URL_LENGTH = 4096
