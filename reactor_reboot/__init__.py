APP_NAME = "reactor-reboot"
__version__ = "0.1.0"
