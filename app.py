"""
app.py
──────
Fleet Rental Monitor: Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Load the CSV fleet snapshot into a RecordStore
  3. Create Dash app with DARKLY bootstrap theme
  4. Register all callbacks against the loaded records
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from fleetview.data.loader import load_records
from fleetview.layout.main import create_layout

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ── 2. Load records ───────────────────────────────────────────────────────────
logger.info("Loading fleet records from %s", settings.DATA_DIR)
records = load_records(settings.DATA_DIR)
if records.is_empty:
    logger.warning("Fleet snapshot in %s holds no equipment, rentals or tracking", settings.DATA_DIR)

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Fleet Monitor",
)

server = app.server  # gunicorn entry point
app.layout = create_layout(records)

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from fleetview.callbacks import alerts, forecasting, gps, navigation, service, usage

navigation.register(app, records)
usage.register(app, records)
service.register(app, records)
gps.register(app, records)
alerts.register(app, records)
forecasting.register(app, records)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
