import json
from pathlib import Path

import numpy as np

n_points = 120
rng = np.random.default_rng(42)

basins = ["Mississippi", "Ohio", "Missouri", "Arkansas"]
states = ["IL", "MO", "KY", "AR", "IN"]
rivers = ["Illinois River", "Wabash River", "O'Brien Creek", "Big Muddy River", "White River"]
environments = ["Floodplain", "Terrace", "Channel fill", "Alluvial fan"]
materials = ["Charcoal", "Wood", "Bone", "Shell"]

features = []
for i in range(n_points):
    center = float(rng.integers(300, 12000))
    margin = float(rng.choice([20, 30, 40, 50, 60, 80, 100]))
    props = {
        "AUTHOR": f"Author {i % 17}",
        "DATE": int(rng.integers(1965, 2022)),
        "RIVER": str(rng.choice(rivers)),
        "MATERIAL": str(rng.choice(materials)),
        "LAB_CODE": f"Beta-{100000 + i}",
        "STATE": str(rng.choice(states)),
        "SEDIMENTARY_CONTEXT": "Overbank",
        "UNCAL_DATA": center,
        "MARGIN": margin,
        "DEPOSITION_ENVIRONMENT": str(rng.choice(environments)),
        "ALLUVIAL_ESSEMBLE": f"Unit {i % 5}",
        "BASIN": str(rng.choice(basins)),
        "UNCAL_MIN": center - 2 * margin,
        "UNCAL_MAX": center + 2 * margin,
    }
    # A few incomplete records, as in real compilations
    if i % 23 == 0:
        props["UNCAL_MIN"] = None
        props["UNCAL_MAX"] = None
    if i % 31 == 0:
        props["MARGIN"] = ""

    lon = float(rng.uniform(-95.0, -84.0))
    lat = float(rng.uniform(33.0, 42.0))
    features.append(
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [lon, lat]},
            "properties": props,
        }
    )

out = Path("config/data/points.geojson")
out.parent.mkdir(parents=True, exist_ok=True)
out.write_text(json.dumps({"type": "FeatureCollection", "features": features}, indent=1))
print("wrote", out, len(features), "features")
