"""Entry point: python -m mochi_mcp"""

import asyncio

from .server import main


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
