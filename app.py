#!/usr/bin/env python3
import logging
import os
import sys
from gamebrowser import create_app, ensure_catalog, BIND, PORT, GAMES_JSON

def _resolve_catalog_file() -> str:
    if len(sys.argv) >= 2:
        return os.path.abspath(sys.argv[1])
    return os.path.abspath(GAMES_JSON)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    catalog_file = _resolve_catalog_file()
    catalog = ensure_catalog(catalog_file)
    app = create_app(catalog_file, catalog=catalog)
    app.run(host=BIND, port=PORT, debug=False, threaded=True)
