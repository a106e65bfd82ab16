APP_NAME = "appdir"
ENV_PREFIX = "APPDIR_"
