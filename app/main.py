"""Translation service command line entry point."""

from dotenv import load_dotenv

from cli import app

load_dotenv()


def run() -> None:
    """Run the command line application."""
    app()


if __name__ == "__main__":
    run()
