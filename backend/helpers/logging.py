# -*- coding: utf-8 -*-
import os
import logging
import pathlib
from datetime import datetime
from logging.handlers import RotatingFileHandler

from backend.utils.settings import LOG_DIR, LOG_LEVEL

date_format = "%Y%m%d"
logfiles = os.path.join(LOG_DIR, 'library - ' + datetime.today().strftime(date_format) + '.log')

pathlib.Path(LOG_DIR).mkdir(parents=True, exist_ok=True)

# création de l'objet logger qui va nous servir à écrire dans les logs
logger = logging.getLogger()
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

# création d'un formateur qui va ajouter le temps, le niveau
# de chaque message quand on écrira un message dans le log
formatter = logging.Formatter('%(asctime)s :: %(levelname)s :: %(message)s')

# handler fichier en mode 'append', 5 backups et une taille max de 1Mo
file_handler = RotatingFileHandler(filename=logfiles,
                                   mode='a',
                                   maxBytes=1000000,
                                   backupCount=5)
file_handler.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
file_handler.setFormatter(formatter)
logger.addHandler(file_handler)

# second handler qui redirige chaque écriture de log sur la console
stream_handler = logging.StreamHandler()
stream_handler.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
stream_handler.setFormatter(formatter)
logger.addHandler(stream_handler)
