APP_NAME = "xdgdir"
ENV_PREFIX = "XDGDIR_"
