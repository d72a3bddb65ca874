import os
import sys
import logging
from typing import List, Optional

from dotenv import load_dotenv

from ..models.errors import CanvasDupError, UsageError
from ..pipeline.duplicate_side_by_side import process_file

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    load_dotenv()
    level = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    canvas-dup <input> <output>

    Returns the process exit status: 0 on success, 1 on any error.
    """
    argv = sys.argv if argv is None else argv
    _configure_logging()

    try:
        if len(argv) != 3:
            prog = os.path.basename(argv[0]) if argv else "canvas-dup"
            raise UsageError(f"Usage: {prog} <input> <output>")
        input_file, output_file = argv[1], argv[2]
        process_file(input_file, output_file)
    except CanvasDupError as err:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {err}", file=sys.stderr)
        return 1

    logger.info(f"Wrote {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
