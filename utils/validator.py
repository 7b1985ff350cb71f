def is_vertex_cover(graph, candidate_set):
    """
    Check if 'candidate_set' is a vertex cover of the graph.

    :param graph: Graph instance.
    :param candidate_set: iterable of vertices forming the proposed cover.
    :return: True if every edge has at least one endpoint in 'candidate_set'.
    """
    # Convert the candidate to a set if it's not already, for faster membership tests
    cover = set(candidate_set)

    for u, v in graph.edges():
        if u not in cover and v not in cover:
            return False

    return True


def is_clique(graph, vertices):
    """
    Check if every pair of distinct vertices in 'vertices' is joined by an edge.
    """
    members = list(set(vertices))
    for i, u in enumerate(members):
        if not graph.has_vertex(u):
            return False
        for v in members[i + 1:]:
            if not graph.contains_edge(u, v):
                return False
    return True


def is_independent_set(graph, vertices):
    """
    Check that no two vertices of 'vertices' are adjacent.
    """
    members = set(vertices)
    for u in members:
        if not graph.has_vertex(u):
            return False
        if not members.isdisjoint(graph.adjacency_list[u]):
            return False
    return True
