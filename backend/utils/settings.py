# -*- coding: UTF-8 -*-
import os

# Surface HTTP figée: pas de configuration par variable d'environnement
API_HOST = "0.0.0.0"
API_PORT = 4000
GRAPHQL_PATH = "/graphql"
API_TITLE = "Library GraphQL API"
API_VERSION = "1.0.0"

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_DIR = os.environ.get(
    'LOG_DIR',
    os.path.join(os.path.dirname(os.path.dirname(os.path.realpath(__file__))), 'logs'),
)
