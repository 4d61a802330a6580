from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from loguru import logger

from minter.app.composition import create_app_dependencies
from minter.app.config.settings import Settings
from minter.app.core import SERVICE_NAME, configure_logging
from minter.app.routers.mint import mint_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    configure_logging(settings.log_level)
    logger.bind(service_name=SERVICE_NAME, event="api_starting").info("")

    dependencies = create_app_dependencies(settings)
    app.state.settings = dependencies.settings
    app.state.metadata_store = dependencies.metadata_store
    app.state.contract = dependencies.contract
    app.state.rng = dependencies.rng

    logger.info("NFT minter - mint 1-of-1 NFTs via meta transactions!")
    logger.info("- Listening on port {}", settings.port)
    logger.info("Now you can mint NFTs by opening: http://localhost:{}/mint", settings.port)
    try:
        yield
    finally:
        logger.bind(service_name=SERVICE_NAME, event="api_stopping").info("")
        await dependencies.close()


app = FastAPI(
    title="NFT Minter",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(mint_router)


def run() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
