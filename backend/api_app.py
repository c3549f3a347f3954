# -*- coding: UTF-8 -*-
from __future__ import annotations
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from strawberry.fastapi import GraphQLRouter

from backend.api.graphql.gqContext_init import get_context
from backend.api.graphql.queries.schema import schema
from backend.helpers.logging import logger
from backend.utils import settings

graphql_app = GraphQLRouter(schema,
                            graphql_ide="graphiql",
                            context_getter=get_context)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestionnaire de lifespan pour l'application FastAPI."""
    logger.info("Démarrage de l'API...")
    for route in app.routes:
        # les routers inclus n'ont pas de path propre
        path = getattr(route, "path", type(route).__name__)
        methods = getattr(route, "methods", None)
        if methods:
            logger.info(f"Route enregistrée: {path} [{methods}]")
        else:
            logger.info(f"Route enregistrée: {path}")
    yield
    logger.info("Arrêt de l'API, les données en mémoire sont perdues.")


app = FastAPI(title=settings.API_TITLE,
              version=settings.API_VERSION,
              lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    response = await call_next(request)
    if response.status_code >= 400:
        logger.error(f"ERROR {response.status_code}: {request.url}")
    return response


app.include_router(graphql_app, prefix=settings.GRAPHQL_PATH, tags=["GraphQL"])


@app.get('/healthcheck', status_code=status.HTTP_200_OK, tags=["health"])
def perform_healthcheck():
    '''Liveness probe: returns {"status": "healthy"} with a 200.'''
    return {"status": "healthy"}


def create_api():
    """
    This function returns the FastAPI app instance.
    """
    return app
