import uvicorn
from loguru import logger

from .main import app
from .settings import settings
from .tls import ensure_self_signed_cert

def main() -> None:
    if not settings.HTTPS_ENABLED:
        logger.info(f"Server starting on http://localhost:{settings.PORT}.")
        uvicorn.run(app, host=settings.HOST, port=settings.PORT)
        return

    try:
        key_path, cert_path = ensure_self_signed_cert(settings.CERTS_DIR)
    except Exception as e:
        logger.warning(f"Certificate generation failed, falling back to HTTP. {e}")
        uvicorn.run(app, host=settings.HOST, port=settings.PORT)
        return

    port = settings.HTTPS_PORT or settings.PORT
    logger.info(f"Server starting on https://localhost:{port}.")
    logger.info("Note: Your browser will show a security warning for the self-signed cert.")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=port,
        ssl_keyfile=str(key_path),
        ssl_certfile=str(cert_path),
    )

if __name__ == "__main__":
    main()
