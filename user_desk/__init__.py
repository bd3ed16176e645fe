APP_NAME = "USER_DESK"
APP_VERSION = "1.0.0"
