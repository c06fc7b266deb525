#!/usr/bin/env python3
"""
  Run the library api development server:
  $ python3 -m libra [Listener-IP] [port]

  An in-memory sqlite database is created and populated with demo data,
  set SQLALCHEMY_DATABASE_URI in the environment to use another database.
"""
import os
import sys
from libra.app import create_app


def main() -> None:
    host = sys.argv[1] if sys.argv[1:] else "127.0.0.1"
    port = int(sys.argv[2]) if sys.argv[2:] else 5000
    config = {"LIBRA_SEED": True}
    db_uri = os.environ.get("SQLALCHEMY_DATABASE_URI", None)
    if db_uri:
        config["SQLALCHEMY_DATABASE_URI"] = db_uri
    app = create_app(config)
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
