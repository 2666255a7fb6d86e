"""Entry point for running the voidstats bot."""

from voidstats.bot import run

if __name__ == "__main__":
    run()
