"""Main entry point for Simple Life."""
from .console.app import main


if __name__ == "__main__":
    main()
