# mplus_source/__main__.py

# Logging is configured by the CLI group according to --verbose.
from mplus_source.cli.main import main


def run():
    main(prog_name="mplus-source")


if __name__ == "__main__":
    run()
