"""Validate a catalog JSON file and print a per-kind summary.

Usage: python scripts/check_catalog.py [path/to/catalog.json]
"""
import os
import sys

# Ensure project root is on sys.path when running from scripts/
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from atomlab.catalog import CATALOG_JSON, load_catalog
from atomlab.validation import CatalogError

path = sys.argv[1] if len(sys.argv) > 1 else str(CATALOG_JSON)
try:
    catalog = load_catalog(path)
except CatalogError as e:
    print(f"Catalog {path} is invalid:")
    for problem in e.problems:
        print("  -", problem)
    sys.exit(1)

print(f"Catalog {path} OK")
print(f"  elements:  {', '.join(e.id for e in catalog.elements)}")
print(f"  molecules: {', '.join(m.id for m in catalog.molecules)}")
print(f"  reactions: {', '.join(r.id for r in catalog.reactions)}")
