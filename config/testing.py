from config.config import Config

HOST = "127.0.0.1"
PORT = 3000
# Every app built under testing gets its own private store.
DB_PATH = ":memory:"
STATIC_DIR = Config.STATIC_DIR
MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
