import logging
import time

# Every Logger writes to a child of this one, so a single file handler gets all of them
PROJECT_LOGGER_NAME = "mvc"

# Messages at or above this level are echoed to the console
loggingLevel = logging.INFO

projectLogger = logging.getLogger(PROJECT_LOGGER_NAME)
projectLogger.setLevel(logging.DEBUG)
# The console echo is done by Logger.log, not by logging's last resort handler
projectLogger.addHandler(logging.NullHandler())

fileHandler = None


def set_level(level):
    """
    Change the console echo threshold. Accepts a logging constant or its name ("DEBUG", ...).
    """
    global loggingLevel
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level {level!r}")
        level = resolved
    loggingLevel = level


def set_log_file(log_file_name):
    """
    Send the messages of every Logger to 'log_file_name', replacing the previous log file.
    """
    global fileHandler
    close_log_file()
    fileHandler = logging.FileHandler(log_file_name)
    fileHandler.setLevel(logging.DEBUG)
    fileHandler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    projectLogger.addHandler(fileHandler)


def close_log_file():
    global fileHandler
    if fileHandler is not None:
        projectLogger.removeHandler(fileHandler)
        fileHandler.close()
        fileHandler = None


class Logger:
    def __init__(self, name, log_file_name=None):
        self.logger = logging.getLogger(f"{PROJECT_LOGGER_NAME}.{name}")
        if log_file_name:
            self.set_log_file(log_file_name)

    def set_log_file(self, log_file_name):
        set_log_file(log_file_name)

    def log(self, message: str, level=logging.INFO):
        self.logger.log(level, message)
        if level >= loggingLevel:
            print(f"[{logging.getLevelName(level)}] [{time.strftime('%d-%m %H:%M:%S', time.localtime())}] : {message}")

    def close(self):
        close_log_file()
