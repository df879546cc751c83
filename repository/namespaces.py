# repository/namespaces.py
from typing import Final

SEPARATOR: Final[str] = ":"

MESH_NAMESPACE: Final[str] = "mesh"
GEO_NAMESPACE: Final[str] = "geo"

MESH_PREFIX: Final[str] = f"{MESH_NAMESPACE}{SEPARATOR}"  # e.g., mesh:#gaming
GEO_PREFIX: Final[str] = f"{GEO_NAMESPACE}{SEPARATOR}"  # e.g., geo:9q8yy:#gaming
