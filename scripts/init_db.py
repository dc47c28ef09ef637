#!/usr/bin/env python3
"""Create the cache tables directly (no Alembic). Idempotent."""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from app.extensions import db

if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()
        print(f"Tables ready: {', '.join(sorted(db.metadata.tables))}")
