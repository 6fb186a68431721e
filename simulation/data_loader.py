# simulation/data_loader.py
import logging
from pathlib import Path

import pandas as pd

from simulation.config import DATA_DIR
from simulation.records import pick, records_from_dicts, stops_from_dicts

logger = logging.getLogger(__name__)

DATASETS = {
    "trip_car": "trip_car.json",
    "trip_foot": "trip_foot.json",
    "stop": "stop.json",
    "point_car": "point_car.json",
}


def load_json(name, data_dir=None):
    """Rows of a JSON array file, or an empty list when missing/empty/broken."""
    path = Path(data_dir or DATA_DIR) / name
    if not path.exists():
        logger.warning(f"Dataset not found: {path}")
        return []
    try:
        df = pd.read_json(path, orient="records", convert_dates=False, dtype=False, precise_float=True)
    except ValueError as e:
        logger.warning(f"Could not parse {path}: {e}")
        return []
    if df.empty or len(df.columns) == 0:
        logger.warning(f"Dataset is empty: {path}")
        return []
    # one table for all rows: keys a row lacked come back as None
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


def _valid_rows(rows, name):
    kept = [r for r in rows if pick(r, "timestamp", "timestamps") not in (None, [], ())]
    if len(kept) != len(rows):
        logger.warning(f"{name}: dropped {len(rows) - len(kept)} rows without timestamps")
    return kept


def load_all(data_dir=None):
    data = {}
    for key, filename in DATASETS.items():
        rows = load_json(filename, data_dir)
        if key == "stop":
            data[key] = stops_from_dicts([r for r in rows if r.get("coordinates") is not None])
        else:
            data[key] = records_from_dicts(_valid_rows(rows, filename))
        logger.info(f"Loaded {len(data[key])} records from {filename}")
    return data
