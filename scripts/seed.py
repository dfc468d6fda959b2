from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine, Session, init_db
from app.db.seed import seed_all, DEFAULT_SEED_PATH

import sys

def run_seed(seed_path=DEFAULT_SEED_PATH):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    with Session(engine) as session:
        seed_all(session, seed_path)

if __name__ == "__main__":
    run_seed(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SEED_PATH)
