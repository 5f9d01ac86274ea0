"""
divisions.py — Bundled seed table of US Fencing division membership.

One row per division: total members plus rated-fencer counts for each
weapon (Foil / Epee / Saber) at ratings A–E. "None" collects members with
no division assigned; it is exported by the federation but never drawn.

Replace at runtime with DATASET_PATH=/path/to/divisions.json (same keys).
"""

SEED_ROWS: tuple[dict, ...] = (
    {"name": "None", "members": 1719, "Foil_A": 87, "Foil_B": 68, "Foil_C": 73, "Foil_D": 38, "Foil_E": 52, "Epee_A": 79, "Epee_B": 80, "Epee_C": 57, "Epee_D": 45, "Epee_E": 51, "Saber_A": 54, "Saber_B": 45, "Saber_C": 65, "Saber_D": 43, "Saber_E": 48},
    {"name": "New Jersey", "members": 1648, "Foil_A": 44, "Foil_B": 24, "Foil_C": 24, "Foil_D": 39, "Foil_E": 60, "Epee_A": 57, "Epee_B": 42, "Epee_C": 51, "Epee_D": 52, "Epee_E": 69, "Saber_A": 36, "Saber_B": 30, "Saber_C": 47, "Saber_D": 40, "Saber_E": 74},
    {"name": "New England", "members": 1481, "Foil_A": 42, "Foil_B": 25, "Foil_C": 42, "Foil_D": 41, "Foil_E": 50, "Epee_A": 65, "Epee_B": 44, "Epee_C": 56, "Epee_D": 52, "Epee_E": 65, "Saber_A": 34, "Saber_B": 19, "Saber_C": 20, "Saber_D": 24, "Saber_E": 34},
    {"name": "Southern California", "members": 1175, "Foil_A": 16, "Foil_B": 13, "Foil_C": 20, "Foil_D": 19, "Foil_E": 33, "Epee_A": 39, "Epee_B": 34, "Epee_C": 25, "Epee_D": 28, "Epee_E": 29, "Saber_A": 15, "Saber_B": 13, "Saber_C": 18, "Saber_D": 22, "Saber_E": 22},
    {"name": "Virginia", "members": 1069, "Foil_A": 11, "Foil_B": 8, "Foil_C": 23, "Foil_D": 30, "Foil_E": 48, "Epee_A": 45, "Epee_B": 35, "Epee_C": 43, "Epee_D": 47, "Epee_E": 50, "Saber_A": 55, "Saber_B": 9, "Saber_C": 19, "Saber_D": 20, "Saber_E": 0},
    {"name": "Metropolitan NYC", "members": 1052, "Foil_A": 24, "Foil_B": 20, "Foil_C": 26, "Foil_D": 27, "Foil_E": 44, "Epee_A": 54, "Epee_B": 28, "Epee_C": 23, "Epee_D": 21, "Epee_E": 29, "Saber_A": 32, "Saber_B": 23, "Saber_C": 35, "Saber_D": 19, "Saber_E": 27},
    {"name": "Central California", "members": 893, "Foil_A": 26, "Foil_B": 17, "Foil_C": 19, "Foil_D": 17, "Foil_E": 31, "Epee_A": 32, "Epee_B": 30, "Epee_C": 40, "Epee_D": 40, "Epee_E": 35, "Saber_A": 64, "Saber_B": 31, "Saber_C": 31, "Saber_D": 19, "Saber_E": 20},
    {"name": "Northern California", "members": 848, "Foil_A": 22, "Foil_B": 11, "Foil_C": 25, "Foil_D": 25, "Foil_E": 47, "Epee_A": 22, "Epee_B": 12, "Epee_C": 28, "Epee_D": 19, "Epee_E": 19, "Saber_A": 12, "Saber_B": 48, "Saber_C": 52, "Saber_D": 0, "Saber_E": 0},
    {"name": "Western Washington", "members": 739, "Foil_A": 7, "Foil_B": 14, "Foil_C": 16, "Foil_D": 24, "Foil_E": 32, "Epee_A": 25, "Epee_B": 26, "Epee_C": 27, "Epee_D": 30, "Epee_E": 40, "Saber_A": 16, "Saber_B": 14, "Saber_C": 15, "Saber_D": 29, "Saber_E": 0},
    {"name": "Georgia", "members": 662, "Foil_A": 7, "Foil_B": 28, "Foil_C": 10, "Foil_D": 10, "Foil_E": 17, "Epee_A": 15, "Epee_B": 23, "Epee_C": 18, "Epee_D": 33, "Epee_E": 15, "Saber_A": 17, "Saber_B": 13, "Saber_C": 18, "Saber_D": 27, "Saber_E": 0},
    {"name": "Illinois", "members": 629, "Foil_A": 14, "Foil_B": 12, "Foil_C": 18, "Foil_D": 27, "Foil_E": 24, "Epee_A": 17, "Epee_B": 29, "Epee_C": 32, "Epee_D": 46, "Epee_E": 29, "Saber_A": 12, "Saber_B": 15, "Saber_C": 25, "Saber_D": 0, "Saber_E": 0},
    {"name": "North Carolina", "members": 618, "Foil_A": 43, "Foil_B": 18, "Foil_C": 26, "Foil_D": 37, "Foil_E": 11, "Epee_A": 13, "Epee_B": 25, "Epee_C": 25, "Epee_D": 30, "Epee_E": 57, "Saber_A": 16, "Saber_B": 11, "Saber_C": 19, "Saber_D": 0, "Saber_E": 0},
    {"name": "Gulf Coast", "members": 599, "Foil_A": 48, "Foil_B": 85, "Foil_C": 32, "Foil_D": 45, "Foil_E": 27, "Epee_A": 24, "Epee_B": 19, "Epee_C": 33, "Epee_D": 30, "Epee_E": 11, "Saber_A": 0, "Saber_B": 3, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Connecticut", "members": 575, "Foil_A": 64, "Foil_B": 10, "Foil_C": 13, "Foil_D": 29, "Foil_E": 11, "Epee_A": 10, "Epee_B": 19, "Epee_C": 14, "Epee_D": 27, "Epee_E": 11, "Saber_A": 8, "Saber_B": 11, "Saber_C": 7, "Saber_D": 30, "Saber_E": 0},
    {"name": "Colorado", "members": 543, "Foil_A": 13, "Foil_B": 10, "Foil_C": 21, "Foil_D": 13, "Foil_E": 21, "Epee_A": 19, "Epee_B": 27, "Epee_C": 49, "Epee_D": 25, "Epee_E": 32, "Saber_A": 17, "Saber_B": 16, "Saber_C": 27, "Saber_D": 8, "Saber_E": 14},
    {"name": "Philadelphia", "members": 524, "Foil_A": 48, "Foil_B": 17, "Foil_C": 9, "Foil_D": 26, "Foil_E": 9, "Epee_A": 14, "Epee_B": 72, "Epee_C": 13, "Epee_D": 6, "Epee_E": 21, "Saber_A": 75, "Saber_B": 13, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Michigan", "members": 522, "Foil_A": 14, "Foil_B": 21, "Foil_C": 22, "Foil_D": 33, "Foil_E": 39, "Epee_A": 7, "Epee_B": 10, "Epee_C": 15, "Epee_D": 15, "Epee_E": 32, "Saber_A": 3, "Saber_B": 45, "Saber_C": 12, "Saber_D": 0, "Saber_E": 0},
    {"name": "Long Island", "members": 487, "Foil_A": 9, "Foil_B": 10, "Foil_C": 18, "Foil_D": 23, "Foil_E": 16, "Epee_A": 11, "Epee_B": 14, "Epee_C": 23, "Epee_D": 37, "Epee_E": 25, "Saber_A": 7, "Saber_B": 42, "Saber_C": 1, "Saber_D": 0, "Saber_E": 0},
    {"name": "Capitol", "members": 472, "Foil_A": 0, "Foil_B": 44, "Foil_C": 9, "Foil_D": 17, "Foil_E": 18, "Epee_A": 12, "Epee_B": 14, "Epee_C": 7, "Epee_D": 19, "Epee_E": 16, "Saber_A": 11, "Saber_B": 14, "Saber_C": 21, "Saber_D": 17, "Saber_E": 0},
    {"name": "Orange Coast", "members": 461, "Foil_A": 15, "Foil_B": 13, "Foil_C": 17, "Foil_D": 17, "Foil_E": 19, "Epee_A": 10, "Epee_B": 57, "Epee_C": 6, "Epee_D": 13, "Epee_E": 15, "Saber_A": 12, "Saber_B": 9, "Saber_C": 7, "Saber_D": 12, "Saber_E": 0},
    {"name": "San Diego", "members": 439, "Foil_A": 8, "Foil_B": 38, "Foil_C": 9, "Foil_D": 16, "Foil_E": 16, "Epee_A": 19, "Epee_B": 12, "Epee_C": 14, "Epee_D": 15, "Epee_E": 11, "Saber_A": 9, "Saber_B": 9, "Saber_C": 10, "Saber_D": 18, "Saber_E": 0},
    {"name": "Oregon", "members": 403, "Foil_A": 3, "Foil_B": 4, "Foil_C": 4, "Foil_D": 10, "Foil_E": 20, "Epee_A": 12, "Epee_B": 12, "Epee_C": 11, "Epee_D": 15, "Epee_E": 18, "Saber_A": 8, "Saber_B": 10, "Saber_C": 13, "Saber_D": 12, "Saber_E": 22},
    {"name": "Central Florida", "members": 397, "Foil_A": 2, "Foil_B": 21, "Foil_C": 21, "Foil_D": 20, "Foil_E": 8, "Epee_A": 11, "Epee_B": 13, "Epee_C": 9, "Epee_D": 29, "Epee_E": 0, "Saber_A": 0, "Saber_B": 3, "Saber_C": 4, "Saber_D": 5, "Saber_E": 0},
    {"name": "South Texas", "members": 397, "Foil_A": 4, "Foil_B": 22, "Foil_C": 4, "Foil_D": 6, "Foil_E": 14, "Epee_A": 11, "Epee_B": 23, "Epee_C": 20, "Epee_D": 12, "Epee_E": 23, "Saber_A": 7, "Saber_B": 19, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "North Texas", "members": 375, "Foil_A": 4, "Foil_B": 24, "Foil_C": 11, "Foil_D": 8, "Foil_E": 5, "Epee_A": 6, "Epee_B": 7, "Epee_C": 11, "Epee_D": 10, "Epee_E": 12, "Saber_A": 15, "Saber_B": 17, "Saber_C": 23, "Saber_D": 21, "Saber_E": 0},
    {"name": "Maryland", "members": 341, "Foil_A": 0, "Foil_B": 77, "Foil_C": 23, "Foil_D": 20, "Foil_E": 8, "Epee_A": 8, "Epee_B": 14, "Epee_C": 19, "Epee_D": 21, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Arizona", "members": 325, "Foil_A": 0, "Foil_B": 24, "Foil_C": 7, "Foil_D": 11, "Foil_E": 4, "Epee_A": 8, "Epee_B": 16, "Epee_C": 19, "Epee_D": 19, "Epee_E": 6, "Saber_A": 3, "Saber_B": 8, "Saber_C": 5, "Saber_D": 5, "Saber_E": 0},
    {"name": "Westchester-Rockland", "members": 324, "Foil_A": 10, "Foil_B": 5, "Foil_C": 28, "Foil_D": 11, "Foil_E": 3, "Epee_A": 6, "Epee_B": 5, "Epee_C": 8, "Epee_D": 8, "Epee_E": 6, "Saber_A": 6, "Saber_B": 4, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Gold Coast Florida", "members": 307, "Foil_A": 4, "Foil_B": 25, "Foil_C": 4, "Foil_D": 6, "Foil_E": 10, "Epee_A": 5, "Epee_B": 9, "Epee_C": 4, "Epee_D": 13, "Epee_E": 22, "Saber_A": 22, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Minnesota", "members": 302, "Foil_A": 2, "Foil_B": 21, "Foil_C": 0, "Foil_D": 19, "Foil_E": 3, "Epee_A": 5, "Epee_B": 5, "Epee_C": 8, "Epee_D": 12, "Epee_E": 13, "Saber_A": 9, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Indiana", "members": 247, "Foil_A": 3, "Foil_B": 12, "Foil_C": 11, "Foil_D": 4, "Foil_E": 11, "Epee_A": 18, "Epee_B": 15, "Epee_C": 16, "Epee_D": 30, "Epee_E": 13, "Saber_A": 13, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Mountain Valley", "members": 241, "Foil_A": 2, "Foil_B": 11, "Foil_C": 2, "Foil_D": 4, "Foil_E": 7, "Epee_A": 6, "Epee_B": 9, "Epee_C": 8, "Epee_D": 4, "Epee_E": 9, "Saber_A": 10, "Saber_B": 10, "Saber_C": 13, "Saber_D": 14, "Saber_E": 0},
    {"name": "South Carolina", "members": 228, "Foil_A": 0, "Foil_B": 0, "Foil_C": 38, "Foil_D": 17, "Foil_E": 0, "Epee_A": 0, "Epee_B": 12, "Epee_C": 10, "Epee_D": 7, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Columbus", "members": 228, "Foil_A": 3, "Foil_B": 10, "Foil_C": 6, "Foil_D": 5, "Foil_E": 3, "Epee_A": 7, "Epee_B": 6, "Epee_C": 4, "Epee_D": 25, "Epee_E": 13, "Saber_A": 6, "Saber_B": 6, "Saber_C": 12, "Saber_D": 0, "Saber_E": 0},
    {"name": "St. Louis", "members": 224, "Foil_A": 0, "Foil_B": 10, "Foil_C": 4, "Foil_D": 17, "Foil_E": 0, "Epee_A": 3, "Epee_B": 6, "Epee_C": 10, "Epee_D": 16, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Utah-Southern Idaho", "members": 223, "Foil_A": 1, "Foil_B": 19, "Foil_C": 8, "Foil_D": 14, "Foil_E": 4, "Epee_A": 3, "Epee_B": 14, "Epee_C": 6, "Epee_D": 13, "Epee_E": 20, "Saber_A": 14, "Saber_B": 13, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Northern Ohio", "members": 220, "Foil_A": 1, "Foil_B": 12, "Foil_C": 8, "Foil_D": 15, "Foil_E": 14, "Epee_A": 11, "Epee_B": 9, "Epee_C": 15, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Wisconsin", "members": 196, "Foil_A": 1, "Foil_B": 12, "Foil_C": 4, "Foil_D": 10, "Foil_E": 3, "Epee_A": 11, "Epee_B": 14, "Epee_C": 15, "Epee_D": 10, "Epee_E": 2, "Saber_A": 13, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Hudson-Berkshire", "members": 189, "Foil_A": 0, "Foil_B": 16, "Foil_C": 67, "Foil_D": 55, "Foil_E": 15, "Epee_A": 61, "Epee_B": 9, "Epee_C": 33, "Epee_D": 8, "Epee_E": 9, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Western Pennsylvania", "members": 184, "Foil_A": 1, "Foil_B": 16, "Foil_C": 62, "Foil_D": 70, "Foil_E": 13, "Epee_A": 6, "Epee_B": 7, "Epee_C": 10, "Epee_D": 11, "Epee_E": 2, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Gateway Florida", "members": 181, "Foil_A": 2, "Foil_B": 14, "Foil_C": 8, "Foil_D": 7, "Foil_E": 35, "Epee_A": 9, "Epee_B": 4, "Epee_C": 10, "Epee_D": 10, "Epee_E": 6, "Saber_A": 1, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Tennessee", "members": 178, "Foil_A": 0, "Foil_B": 22, "Foil_C": 13, "Foil_D": 13, "Foil_E": 25, "Epee_A": 7, "Epee_B": 8, "Epee_C": 19, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Iowa", "members": 162, "Foil_A": 0, "Foil_B": 0, "Foil_C": 5, "Foil_D": 15, "Foil_E": 0, "Epee_A": 16, "Epee_B": 6, "Epee_C": 11, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Alabama", "members": 160, "Foil_A": 5, "Foil_B": 4, "Foil_C": 6, "Foil_D": 4, "Foil_E": 3, "Epee_A": 2, "Epee_B": 8, "Epee_C": 12, "Epee_D": 8, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Northeast", "members": 158, "Foil_A": 0, "Foil_B": 0, "Foil_C": 27, "Foil_D": 20, "Foil_E": 13, "Epee_A": 5, "Epee_B": 10, "Epee_C": 14, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Western New York", "members": 154, "Foil_A": 2, "Foil_B": 0, "Foil_C": 6, "Foil_D": 4, "Foil_E": 9, "Epee_A": 4, "Epee_B": 1, "Epee_C": 20, "Epee_D": 5, "Epee_E": 11, "Saber_A": 22, "Saber_B": 6, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Nevada", "members": 132, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 0, "Foil_E": 0, "Epee_A": 11, "Epee_B": 12, "Epee_C": 12, "Epee_D": 7, "Epee_E": 9, "Saber_A": 0, "Saber_B": 2, "Saber_C": 3, "Saber_D": 3, "Saber_E": 0},
    {"name": "Kansas", "members": 119, "Foil_A": 1, "Foil_B": 10, "Foil_C": 27, "Foil_D": 12, "Foil_E": 5, "Epee_A": 4, "Epee_B": 10, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Kentucky", "members": 117, "Foil_A": 6, "Foil_B": 3, "Foil_C": 2, "Foil_D": 17, "Foil_E": 7, "Epee_A": 7, "Epee_B": 5, "Epee_C": 9, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Southwest Ohio", "members": 110, "Foil_A": 2, "Foil_B": 4, "Foil_C": 8, "Foil_D": 7, "Foil_E": 6, "Epee_A": 3, "Epee_B": 2, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Nebraska-South Dakota", "members": 95, "Foil_A": 0, "Foil_B": 0, "Foil_C": 5, "Foil_D": 12, "Foil_E": 2, "Epee_A": 5, "Epee_B": 6, "Epee_C": 0, "Epee_D": 1, "Epee_E": 3, "Saber_A": 2, "Saber_B": 4, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Harrisburg", "members": 93, "Foil_A": 0, "Foil_B": 10, "Foil_C": 3, "Foil_D": 7, "Foil_E": 11, "Epee_A": 3, "Epee_B": 5, "Epee_C": 4, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "San Bernardino", "members": 91, "Foil_A": 2, "Foil_B": 1, "Foil_C": 2, "Foil_D": 11, "Foil_E": 10, "Epee_A": 2, "Epee_B": 2, "Epee_C": 2, "Epee_D": 1, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Ark-La-Miss", "members": 81, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 17, "Foil_E": 0, "Epee_A": 20, "Epee_B": 6, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Green Mountain", "members": 77, "Foil_A": 0, "Foil_B": 0, "Foil_C": 12, "Foil_D": 7, "Foil_E": 24, "Epee_A": 5, "Epee_B": 11, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Inland Empire", "members": 71, "Foil_A": 0, "Foil_B": 0, "Foil_C": 2, "Foil_D": 4, "Foil_E": 10, "Epee_A": 6, "Epee_B": 3, "Epee_C": 1, "Epee_D": 1, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Oklahoma", "members": 70, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 10, "Foil_E": 4, "Epee_A": 23, "Epee_B": 10, "Epee_C": 6, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "New Mexico", "members": 63, "Foil_A": 0, "Foil_B": 0, "Foil_C": 11, "Foil_D": 0, "Foil_E": 4, "Epee_A": 3, "Epee_B": 4, "Epee_C": 7, "Epee_D": 8, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Louisiana", "members": 63, "Foil_A": 0, "Foil_B": 0, "Foil_C": 2, "Foil_D": 4, "Foil_E": 10, "Epee_A": 16, "Epee_B": 11, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Border Texas", "members": 59, "Foil_A": 0, "Foil_B": 13, "Foil_C": 16, "Foil_D": 20, "Foil_E": 28, "Epee_A": 8, "Epee_B": 0, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "South Jersey", "members": 55, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 10, "Foil_E": 11, "Epee_A": 6, "Epee_B": 0, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "National", "members": 53, "Foil_A": 0, "Foil_B": 50, "Foil_C": 32, "Foil_D": 23, "Foil_E": 22, "Epee_A": 4, "Epee_B": 0, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Plains Texas", "members": 37, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 0, "Foil_E": 0, "Epee_A": 12, "Epee_B": 4, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Central Pennsylvania", "members": 32, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 3, "Foil_E": 22, "Epee_A": 10, "Epee_B": 4, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Alaska", "members": 32, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 0, "Foil_E": 0, "Epee_A": 0, "Epee_B": 0, "Epee_C": 0, "Epee_D": 0, "Epee_E": 0, "Saber_A": 1, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Northeast Pennsylvania", "members": 22, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 2, "Foil_E": 0, "Epee_A": 0, "Epee_B": 1, "Epee_C": 2, "Epee_D": 3, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Wyoming", "members": 18, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 0, "Foil_E": 0, "Epee_A": 0, "Epee_B": 1, "Epee_C": 0, "Epee_D": 2, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "Hawaii", "members": 15, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 3, "Foil_E": 1, "Epee_A": 0, "Epee_B": 1, "Epee_C": 2, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
    {"name": "North Coast", "members": 8, "Foil_A": 0, "Foil_B": 0, "Foil_C": 0, "Foil_D": 0, "Foil_E": 0, "Epee_A": 0, "Epee_B": 1, "Epee_C": 1, "Epee_D": 0, "Epee_E": 0, "Saber_A": 0, "Saber_B": 0, "Saber_C": 0, "Saber_D": 0, "Saber_E": 0},
)
