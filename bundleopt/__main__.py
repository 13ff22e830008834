"""
__main__ provides the console-script entrypoint for the bundleopt package.
"""
from __future__ import annotations

import sys
import traceback

import yaml

from bundleopt.cli import CLI, run
from bundleopt.console import logger


def main(argv: list[str] | None = None) -> int:
    """
    main is the entrypoint for the `bundleopt` console script.
    """
    try:
        return run(CLI().parse_command(argv))
    except SystemExit as e:
        return int(e.code) if isinstance(e.code, int) else 1
    except ValueError as e:
        logger.error(f"error: {e}")
        return 1
    except yaml.YAMLError as e:
        logger.error(f"invalid YAML: {e}")
        return 1
    except OSError as e:
        logger.error(f"could not read config: {e}")
        return 1
    except Exception as e:
        logger.error(f"unexpected error: {type(e).__name__}: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
