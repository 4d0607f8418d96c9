from __future__ import annotations

import os

from enrollment_system.main import create_app

app = create_app()


if __name__ == "__main__":
    # threaded: the store serializes writes, requests may overlap
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "3000")), threaded=True)
