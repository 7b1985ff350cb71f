import os

from graph import Graph

GRAPH_EXTENSIONS = (".clq", ".col")


class InvalidClqFileFormat(ValueError):
    pass


def parse_clq(lines):
    """
    Parses a DIMACS-style graph (.clq / .col).
    Format:
      c (comment lines)
      p edge n m     ("p col n m" is accepted too)
      e u v          (m lines of edges, 1-based)
    Returns:
      Graph with vertices 0..n-1 (0-based).
    Raises:
      InvalidClqFileFormat when the content does not follow the format.
    """
    graph = None
    order = 0
    expected_edges = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            continue
        parts = line.split()
        prefix = parts[0]

        if prefix == 'c':
            continue

        if prefix == 'p':
            if graph is not None:
                raise InvalidClqFileFormat(f"Line {line_number}: duplicated problem line {line!r}")
            if len(parts) != 4 or parts[1] not in ("edge", "col"):
                raise InvalidClqFileFormat(f"Line {line_number}: expecting 'p edge <n> <m>', got {line!r}")
            order = _parse_int(parts[2], line_number)
            expected_edges = _parse_int(parts[3], line_number)
            graph = Graph(range(order))

        elif prefix == 'e':
            if graph is None:
                raise InvalidClqFileFormat(f"Line {line_number}: edge found before the 'p' line")
            if len(parts) != 3:
                raise InvalidClqFileFormat(f"Line {line_number}: expecting 'e <u> <v>', got {line!r}")
            u = _parse_int(parts[1], line_number)
            v = _parse_int(parts[2], line_number)
            for vertex in (u, v):
                if not 1 <= vertex <= order:
                    raise InvalidClqFileFormat(
                        f"Line {line_number}: vertex {vertex} outside of 1..{order}")
            if u == v:
                raise InvalidClqFileFormat(f"Line {line_number}: self-loop on vertex {u}")
            graph.add_edge(u - 1, v - 1)

        else:
            raise InvalidClqFileFormat(f"Line {line_number}: invalid line {line!r}")

    if graph is None or order == 0:
        raise InvalidClqFileFormat("Expecting graph order")
    if graph.edge_count() != expected_edges:
        raise InvalidClqFileFormat(
            f"Expecting {expected_edges} edges but read {graph.edge_count()} edges")
    return graph


def _parse_int(token, line_number):
    try:
        value = int(token)
    except ValueError:
        raise InvalidClqFileFormat(f"Line {line_number}: {token!r} is not an integer") from None
    if value < 0:
        raise InvalidClqFileFormat(f"Line {line_number}: {token!r} is negative")
    return value


def load_clq_file(filePath: str):
    """
    Load a graph from a DIMACS .clq/.col file. See parse_clq for the format.
    """
    try:
        with open(filePath, "r") as f:
            return parse_clq(f)
    except OSError as e:
        raise InvalidClqFileFormat(f"Unable to read graph file {filePath!r}: {e}") from e


def graph_to_string(graph):
    """
    Returns the graph in the DIMACS .clq format (vertices written 1-based).
    """
    lines = [f"p edge {graph.vertex_count()} {graph.edge_count()}"]
    for u, v in graph.edges():
        lines.append(f"e {u + 1} {v + 1}")
    return "\n".join(lines) + "\n"


def write_clq_file(graph, filePath: str, comment: str = None):
    with open(filePath, "w") as f:
        if comment:
            for comment_line in comment.splitlines():
                f.write(f"c {comment_line}\n")
        f.write(graph_to_string(graph))


def get_graph_files(directory):
    """
    Get all .clq / .col graph files in the specified directory, sorted by name.
    """
    return sorted(filePath for filePath in os.listdir(directory) if filePath.endswith(GRAPH_EXTENSIONS))
