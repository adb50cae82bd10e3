"""
Bundled example hierarchy: one root, two branches, four levels deep.

Used when no --tree file is given on the command line.
"""

LEVEL_COLORS = ["#2563eb", "#C41E3A", "#fbbf24", "#a3e635"]
LEVEL_Z = [100, 90, 80, 70]


def _leaf(node_id, label):
    return {"id": node_id, "label": label, "level": 3,
            "color": LEVEL_COLORS[3], "zIndex": LEVEL_Z[3]}


def _branch(node_id, label, level, children):
    return {"id": node_id, "label": label, "level": level,
            "color": LEVEL_COLORS[level], "zIndex": LEVEL_Z[level],
            "children": children}


SAMPLE_TREE = _branch("n1", "Root", 0, [
    _branch("n2", "L1-A", 1, [
        _branch("n4", "L2-A1", 2, [
            _leaf("n10", "L3-A1a"), _leaf("n11", "L3-A1b"), _leaf("n12", "L3-A1c"),
        ]),
        _branch("n5", "L2-A2", 2, [
            _leaf("n13", "L3-A2a"), _leaf("n14", "L3-A2b"), _leaf("n15", "L3-A2c"),
        ]),
    ]),
    _branch("n3", "L1-B", 1, [
        _branch("n6", "L2-B1", 2, [
            _leaf("n16", "L3-B1a"), _leaf("n17", "L3-B1b"), _leaf("n18", "L3-B1c"),
        ]),
        _branch("n7", "L2-B2", 2, [
            _leaf("n19", "L3-B2a"), _leaf("n20", "L3-B2b"), _leaf("n21", "L3-B2c"),
        ]),
    ]),
])
