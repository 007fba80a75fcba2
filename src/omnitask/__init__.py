# SPDX-License-Identifier: MIT

from omnitask.cleanup import register_cleanup
from omnitask.initialize import initialize
from omnitask.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
