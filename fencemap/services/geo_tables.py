"""
geo_tables.py — Static lookup tables for placing divisions on the map.

All tables are built once at import time and exposed read-only
(MappingProxyType). Insertion order is significant for JURISDICTION_CODES:
the substring fallback in region_resolver scans it front to back and the
first hit wins.

Coordinates are (lat, lng) in degrees.
"""

from types import MappingProxyType

# Fallback jurisdiction: Kansas, the geographic center of the contiguous US.
DEFAULT_JURISDICTION = "KS"

# ── Curated division centers ──────────────────────────────────────────────────
# Hand-picked points for every division in the federation table. Regional
# divisions sit on their main population center rather than a state centroid
# (e.g. "Metropolitan NYC" is Manhattan, not the middle of New York State).

_DIVISION_COORDINATES = {
    "New Jersey": (40.0583, -74.4057),
    "New England": (42.0000, -71.5000),
    "Southern California": (34.0522, -118.2437),
    "Virginia": (37.4316, -78.6569),
    "Metropolitan NYC": (40.7128, -74.0060),
    "Central California": (36.7378, -119.7871),
    "Northern California": (38.5816, -121.4944),
    "Western Washington": (47.6062, -122.3321),
    "Georgia": (32.1656, -82.9001),
    "Illinois": (40.6331, -89.3985),
    "North Carolina": (35.7596, -79.0193),
    "Gulf Coast": (29.9511, -90.0715),
    "Connecticut": (41.6032, -73.0877),
    "Colorado": (39.5501, -105.7821),
    "Philadelphia": (39.9526, -75.1652),
    "Michigan": (44.3148, -85.6024),
    "Long Island": (40.7891, -73.1349),
    "Capitol": (38.9072, -77.0369),
    "Orange Coast": (33.6189, -117.9298),
    "San Diego": (32.7157, -117.1611),
    "Oregon": (43.8041, -120.5542),
    "Central Florida": (28.5384, -81.3789),
    "South Texas": (27.5300, -97.8600),
    "North Texas": (32.7767, -96.7970),
    "Maryland": (39.0458, -76.6413),
    "Arizona": (34.0489, -111.0937),
    "Westchester-Rockland": (41.1195, -73.7949),
    "Gold Coast Florida": (26.1224, -80.1373),
    "Minnesota": (46.7296, -94.6859),
    "Indiana": (40.2672, -86.1349),
    "Mountain Valley": (40.7608, -111.8910),
    "South Carolina": (33.8361, -81.1637),
    "Columbus": (39.9612, -82.9988),
    "St. Louis": (38.6270, -90.1994),
    "Utah-Southern Idaho": (41.8000, -112.2000),
    "Northern Ohio": (41.4993, -81.6944),
    "Wisconsin": (43.7844, -88.7879),
    "Hudson-Berkshire": (42.3000, -73.6000),
    "Western Pennsylvania": (40.4406, -79.9959),
    "Gateway Florida": (26.5362, -81.7806),
    "Tennessee": (35.5175, -86.5804),
    "Iowa": (41.8780, -93.0977),
    "Alabama": (32.3182, -86.9023),
    "Northeast": (42.5000, -75.0000),
    "Western New York": (42.8864, -78.8784),
    "Nevada": (38.8026, -116.4194),
    "Kansas": (39.0119, -98.4842),
    "Kentucky": (37.8393, -84.2700),
    "Southwest Ohio": (39.7589, -84.1916),
    "Nebraska-South Dakota": (42.5000, -99.5000),
    "Harrisburg": (40.2732, -76.8867),
    "San Bernardino": (34.1083, -117.2898),
    "Ark-La-Miss": (32.5000, -92.1000),
    "Green Mountain": (44.5588, -72.5778),
    "Inland Empire": (33.9806, -117.3755),
    "Oklahoma": (35.4676, -97.5164),
    "New Mexico": (34.5199, -105.8701),
    "Louisiana": (31.2448, -92.1450),
    "Border Texas": (27.5036, -99.5075),
    "South Jersey": (39.6000, -74.9000),
    "National": (39.8283, -98.5795),
    "Plains Texas": (33.5779, -101.8552),
    "Central Pennsylvania": (40.7934, -77.8600),
    "Alaska": (64.2008, -149.4937),
    "Northeast Pennsylvania": (41.4089, -75.6624),
    "Wyoming": (43.0750, -107.2903),
    "Hawaii": (21.3099, -157.8584),
    "North Coast": (38.4400, -122.7140),
    "None": (39.8283, -98.5795),
}

# ── Jurisdiction (state) centroids ────────────────────────────────────────────

_JURISDICTION_CENTROIDS = {
    "AL": (32.806671, -86.79113), "AK": (64.2008, -149.4937), "AZ": (33.729759, -111.431221),
    "AR": (34.969704, -92.373123), "CA": (36.116203, -119.681564), "CO": (39.059811, -105.311104),
    "CT": (41.597782, -72.755371), "DC": (38.905985, -77.033418), "DE": (39.318523, -75.507141),
    "FL": (27.766279, -81.686783), "GA": (33.040619, -83.643074), "HI": (21.3099, -157.8584),
    "IA": (42.011539, -93.210526), "ID": (44.240459, -114.478828), "IL": (40.349457, -88.986137),
    "IN": (39.849426, -86.258278), "KS": (38.5266, -96.726486), "KY": (37.66814, -84.670067),
    "LA": (31.169546, -91.867805), "MA": (42.230171, -71.530106), "MD": (39.063946, -76.802101),
    "ME": (44.693947, -69.381927), "MI": (43.326618, -84.536095), "MN": (45.694454, -93.900192),
    "MO": (38.456085, -92.288368), "MS": (32.741646, -89.678696), "MT": (46.921925, -110.454353),
    "NC": (35.630066, -79.806419), "ND": (47.528912, -99.784012), "NE": (41.12537, -98.268082),
    "NH": (43.452492, -71.563896), "NJ": (40.298904, -74.521011), "NM": (34.840515, -106.248482),
    "NV": (38.313515, -117.055374), "NY": (42.165726, -74.948051), "OH": (40.388783, -82.764915),
    "OK": (35.565342, -96.928917), "OR": (44.572021, -122.070938), "PA": (40.590752, -77.209755),
    "RI": (41.680893, -71.51178), "SC": (33.856892, -80.945007), "SD": (44.299782, -99.438828),
    "TN": (35.747845, -86.692345), "TX": (31.054487, -97.563461), "UT": (40.150032, -111.862434),
    "VA": (37.769337, -78.169968), "VT": (44.045876, -72.710686), "WA": (47.400902, -121.490494),
    "WI": (44.268543, -89.616508), "WV": (38.491226, -80.954453), "WY": (42.755966, -107.30249),
}

# ── Division → anchor jurisdiction ────────────────────────────────────────────
# Heuristic: each regional division maps to the state it mostly covers.

_DIVISION_JURISDICTIONS = {
    "New England": "MA",
    "Metropolitan NYC": "NY",
    "Westchester-Rockland": "NY",
    "Long Island": "NY",
    "Western New York": "NY",
    "Hudson-Berkshire": "MA",
    "Northeast Pennsylvania": "PA",
    "Central Pennsylvania": "PA",
    "Western Pennsylvania": "PA",
    "Philadelphia": "PA",
    "Harrisburg": "PA",
    "Northern Ohio": "OH",
    "Southwest Ohio": "OH",
    "Columbus": "OH",
    "St. Louis": "MO",
    "Northern California": "CA",
    "Central California": "CA",
    "Southern California": "CA",
    "Orange Coast": "CA",
    "San Diego": "CA",
    "San Bernardino": "CA",
    "Inland Empire": "CA",
    "North Coast": "CA",
    "Oregon": "OR",
    "Western Washington": "WA",
    "Georgia": "GA",
    "Illinois": "IL",
    "North Carolina": "NC",
    "Connecticut": "CT",
    "Colorado": "CO",
    "Michigan": "MI",
    "Capitol": "DC",
    "Central Florida": "FL",
    "Gold Coast Florida": "FL",
    "Gateway Florida": "FL",
    "Arizona": "AZ",
    "Maryland": "MD",
    "Minnesota": "MN",
    "Indiana": "IN",
    "Mountain Valley": "UT",
    "South Carolina": "SC",
    "Wisconsin": "WI",
    "Tennessee": "TN",
    "Iowa": "IA",
    "Alabama": "AL",
    "Northeast": "NY",
    "Nevada": "NV",
    "Kansas": "KS",
    "Kentucky": "KY",
    "Nebraska-South Dakota": "NE",
    "Ark-La-Miss": "MS",
    "Green Mountain": "VT",
    "Oklahoma": "OK",
    "New Mexico": "NM",
    "Louisiana": "LA",
    "Border Texas": "TX",
    "South Texas": "TX",
    "North Texas": "TX",
    "Plains Texas": "TX",
    "National": "KS",
    "Alaska": "AK",
    "Wyoming": "WY",
    "Hawaii": "HI",
    "Virginia": "VA",
    "Gulf Coast": "TX",
    "South Jersey": "NJ",
    "New Jersey": "NJ",
}

# ── Jurisdiction name → code ──────────────────────────────────────────────────

_JURISDICTION_CODES = {
    "Alabama": "AL", "Alaska": "AK", "Arizona": "AZ", "Arkansas": "AR", "California": "CA", "Colorado": "CO",
    "Connecticut": "CT", "Delaware": "DE", "Florida": "FL", "Georgia": "GA", "Hawaii": "HI", "Idaho": "ID",
    "Illinois": "IL", "Indiana": "IN", "Iowa": "IA", "Kansas": "KS", "Kentucky": "KY", "Louisiana": "LA",
    "Maine": "ME", "Maryland": "MD", "Massachusetts": "MA", "Michigan": "MI", "Minnesota": "MN",
    "Mississippi": "MS", "Missouri": "MO", "Montana": "MT", "Nebraska": "NE", "Nevada": "NV",
    "New Hampshire": "NH", "New Jersey": "NJ", "New Mexico": "NM", "New York": "NY",
    "North Carolina": "NC", "North Dakota": "ND", "Ohio": "OH", "Oklahoma": "OK", "Oregon": "OR",
    "Pennsylvania": "PA", "Rhode Island": "RI", "South Carolina": "SC", "South Dakota": "SD",
    "Tennessee": "TN", "Texas": "TX", "Utah": "UT", "Vermont": "VT", "Virginia": "VA", "Washington": "WA",
    "West Virginia": "WV", "Wisconsin": "WI", "Wyoming": "WY", "District of Columbia": "DC",
}

# Words that mark a division name as a sub-state region rather than a state.
REGION_KEYWORDS: tuple[str, ...] = (
    "Northern", "Southern", "Western", "Eastern", "Central", "Coast", "Metropolitan",
    "San ", "Westchester", "Long Island", "Gateway", "Gold Coast", "Inland Empire",
    "Border", "Plains", "Northeast", "Hudson", "Rockland", "Mountain", "Valley",
    "National", "Philadelphia", "Harrisburg", "Columbus", "St. Louis", "San Bernardino", "San Diego",
)

# Large / isolated jurisdictions that get a wider focus view.
REMOTE_JURISDICTIONS = frozenset({"HI", "AK"})

DIVISION_COORDINATES = MappingProxyType(_DIVISION_COORDINATES)
JURISDICTION_CENTROIDS = MappingProxyType(_JURISDICTION_CENTROIDS)
DIVISION_JURISDICTIONS = MappingProxyType(_DIVISION_JURISDICTIONS)
JURISDICTION_CODES = MappingProxyType(_JURISDICTION_CODES)
