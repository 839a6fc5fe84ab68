import os

from config.config import Config

HOST = Config.HOST
PORT = Config.PORT
DB_PATH = Config.DB_PATH
STATIC_DIR = Config.STATIC_DIR
MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
