"""Write exported documents to disk"""

from pathlib import Path
from typing import Union

from asyncapi_exporter.core.logger import Logger


def write_output(content: str, output_path: Union[str, Path], logger: Logger) -> Path:
    """
    Write content to a file.

    Args:
        content: The content to write to the output file
        output_path: The path to the output file, parents are created
        logger: Receives the confirmation line

    Returns:
        The path written to
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Output written to: {path}")
    return path
