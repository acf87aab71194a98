#setup: pip install -e .
#setup: python -m contribution_planner

from contribution_planner.app import create_app
from contribution_planner.config import Settings


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    app.run(port=settings.port, debug=True)


if __name__ == "__main__":
    main()
