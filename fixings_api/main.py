"""FastAPI app with Strawberry GraphQL."""

import logging

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from fixings_api.config import get_settings
from fixings_api.schema import schema

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.api_title, version=settings.api_version)
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")
logger.info("%s %s ready", settings.api_title, settings.api_version)


@app.get("/health")
def health() -> dict[str, str]:
    """Health check for load balancers and Docker."""
    return {"status": "ok"}
