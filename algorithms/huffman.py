"""
huffman.py — Huffman Coding (step log)
=======================================
Builds the Huffman tree for a piece of text and derives the code table.

Phases (carried in Snapshot.phase):
    Counting Frequencies → Initial Forest → Building Tree
    → Generating Codes → Completed

Overlay keys on every snapshot:
    "forest"      – ids of the current roots, in priority order
    "all_nodes"   – every tree node: {id, char, freq, is_leaf, left, right}
    "edges"       – {source, target, label} with label "0" (left) / "1" (right)
    "frequencies" – {char: count} in first-appearance order
    "codes"       – {char: bitstring} assigned so far

Determinism: roots are ordered by (frequency, node id) and node ids are
handed out in creation order, so equal frequencies always merge the
same way.  A text with a single distinct character gets the code "0".

Returns {"root_id", "codes", "frequencies", "encoded"}.
"""

import heapq
from typing import Any, Dict, Generator, List, Optional

from algorithms.step import Snapshot, StepBuilder


PSEUDOCODE: List[str] = [
    "def huffman(text):",                           # 0
    "    freq ← count characters",                  # 1
    "    pq ← [leaf(c, f) for c, f in freq]",       # 2
    "    while len(pq) > 1:",                       # 3
    "        a, b ← pop two smallest",              # 4
    "        pq.push(node(a.freq + b.freq, a, b))", # 5
    "    assign 0 to left, 1 to right from root",   # 6
]


def huffman(text: str) -> Generator[Snapshot, None, Dict[str, Any]]:
    sb = StepBuilder()
    sb.overlay.update(forest=[], all_nodes=[], edges=[], frequencies={}, codes={})

    if not text:
        sb.phase = "Completed"
        yield sb.build("Empty text provided.", is_final=True)
        return {"root_id": None, "codes": {}, "frequencies": {}, "encoded": ""}

    # 1. count frequencies
    sb.phase = "Counting Frequencies"
    sb.pseudocode_line = 1
    yield sb.build("Calculating character frequencies...")

    freq: Dict[str, int] = {}
    for ch in text:
        freq[ch] = freq.get(ch, 0) + 1

    nodes: Dict[int, Dict[str, Any]] = {}
    heap = []
    for ch, count in freq.items():
        nid = len(nodes)
        nodes[nid] = {"id": nid, "char": ch, "freq": count, "is_leaf": True, "left": None, "right": None}
        heapq.heappush(heap, (count, nid))

    def sync_forest() -> None:
        sb.overlay["forest"] = [nid for _, nid in sorted(heap)]
        sb.overlay["all_nodes"] = list(nodes.values())

    sb.phase = "Initial Forest"
    sb.pseudocode_line = 2
    sb.overlay["frequencies"] = dict(freq)
    sync_forest()
    yield sb.build(f"Found {len(freq)} unique characters.")

    # 2. build tree
    sb.phase = "Building Tree"
    while len(heap) > 1:
        _, left = heapq.heappop(heap)
        _, right = heapq.heappop(heap)
        a, b = nodes[left], nodes[right]

        sb.highlight_nodes = [left, right]
        sb.highlight_edges = []
        sb.pseudocode_line = 4
        sync_forest()
        yield sb.build(
            f"Popping two nodes with smallest frequencies: "
            f"'{a['char'] or '*'}' ({a['freq']}) and '{b['char'] or '*'}' ({b['freq']})."
        )

        nid = len(nodes)
        total = a["freq"] + b["freq"]
        nodes[nid] = {"id": nid, "char": None, "freq": total, "is_leaf": False, "left": left, "right": right}
        heapq.heappush(heap, (total, nid))
        sb.overlay["edges"].append({"source": nid, "target": left, "label": "0"})
        sb.overlay["edges"].append({"source": nid, "target": right, "label": "1"})

        sb.highlight_nodes = [nid]
        sb.highlight_edges = [(nid, left), (nid, right)]
        sb.pseudocode_line = 5
        sync_forest()
        yield sb.build(f"Created parent node with frequency {total}.")

    root_id = heap[0][1]

    # 3. generate codes
    sb.phase = "Generating Codes"
    sb.highlight_nodes = []
    sb.highlight_edges = []
    sb.pseudocode_line = 6
    yield sb.build("Tree built! Generating codes by traversing from root.")

    codes: Dict[str, str] = {}

    def walk(nid: Optional[int], prefix: str) -> Generator[Snapshot, None, None]:
        if nid is None:
            return
        node = nodes[nid]
        sb.highlight_nodes = [nid]
        shown = f"'{node['char']}'" if node["is_leaf"] else node["freq"]
        yield sb.build(f"Traversing to node {shown}, code so far: '{prefix}'")
        if node["is_leaf"]:
            codes[node["char"]] = prefix or "0"
            sb.overlay["codes"] = dict(codes)
            yield sb.build(f"Assigned code '{codes[node['char']]}' to '{node['char']}'.")
            return
        yield from walk(node["left"], prefix + "0")
        yield from walk(node["right"], prefix + "1")

    yield from walk(root_id, "")

    sb.phase = "Completed"
    sb.highlight_nodes = []
    yield sb.build("Huffman Coding complete.", is_final=True)

    return {
        "root_id": root_id,
        "codes": dict(codes),
        "frequencies": dict(freq),
        "encoded": "".join(codes[ch] for ch in text),
    }
