"""T-shirt store FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 5000 --reload
    python src/app.py            # serves on $PORT (default 5000)

PROTEAN_ENV selects the configuration overlay in `store/domain.toml`
(`production` switches persistence to PostgreSQL via DATABASE_URL).
"""

from store.api.application import create_app
from store.domain import store

# Initialized at module level so uvicorn workers share it
store.init()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    from store.config import get_settings

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
