"""Services built on the floor/room tree: bill of materials and hydraulics."""
