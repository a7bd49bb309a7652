"""
Configuración básica de logging del microservicio
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configura el logger raíz con un handler de consola

    Si el logger raíz ya tiene handlers (por ejemplo al correr los tests
    o al recrear la app) no hace nada.

    Args:
        level: Nivel de logging ("DEBUG", "INFO", ...), sin distinguir mayúsculas
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
