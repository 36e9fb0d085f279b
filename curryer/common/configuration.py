import json
import logging
import os

# KEY VALUES FOR CONFIG
LOGLEVEL = 'LOGLEVEL'
LOGFORMAT = 'LOGFORMAT'
MODE = 'MODE'

DEFAULTS = {
    LOGLEVEL: 'WARNING',
    LOGFORMAT: '%(levelname)s %(name)s: %(message)s',
    MODE: 'curry',
}


class CurryConfig:
    def __init__(self, cfg):
        self._config = dict(DEFAULTS)
        self._config.update(cfg)

    @staticmethod
    def default():
        return CurryConfig({})

    @staticmethod
    def load_file(file):
        if os.path.exists(file):
            with open(file) as cfg:
                return CurryConfig(json.load(cfg))
        else:
            raise RuntimeError("configuration not found!!!")

    @property
    def config(self):
        return self._config

    @property
    def loglevel(self):
        level = logging.getLevelName(str(self._config[LOGLEVEL]).upper())
        if not isinstance(level, int):
            raise RuntimeError("unknown log level {0}".format(self._config[LOGLEVEL]))
        return level

    @property
    def logformat(self):
        return self._config[LOGFORMAT]

    @property
    def mode(self):
        return self._config[MODE]

    def setup_logging(self):
        logging.basicConfig(level=self.loglevel, format=self.logformat)
