import networkx as nx


class VertexNotFoundError(KeyError):
    pass


class EdgeNotFoundError(KeyError):
    pass


class Graph:
    def __init__(self, vertices=None):
        """
        Create an undirected graph without self-loops.
        Adjacency is stored in a dict of sets (vertex -> neighbors) for quick neighbor lookup.
        """
        self.adjacency_list = {}
        self._edge_count = 0
        if vertices is not None:
            for v in vertices:
                self.add_vertex(v)

    @classmethod
    def from_edges(cls, n, edges):
        """
        Build a graph on vertices 0..n-1 with the given 0-based edges.
        """
        graph = cls(range(n))
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @classmethod
    def from_networkx(cls, nx_graph):
        graph = cls(nx_graph.nodes)
        for u, v in nx_graph.edges:
            graph.add_edge(u, v)
        return graph

    def to_networkx(self):
        nx_graph = nx.Graph()
        nx_graph.add_nodes_from(self.adjacency_list)
        nx_graph.add_edges_from(self.edges())
        return nx_graph

    def add_vertex(self, v):
        if v not in self.adjacency_list:
            self.adjacency_list[v] = set()

    def add_edge(self, u, v):
        """
        Add undirected edge (u, v). Missing endpoints are added.
        Adding an edge that is already present does nothing.
        """
        if u == v:
            raise ValueError(f"Self-loop on vertex {u} is not allowed")
        self.add_vertex(u)
        self.add_vertex(v)
        if v in self.adjacency_list[u]:
            return
        self.adjacency_list[u].add(v)
        self.adjacency_list[v].add(u)
        self._edge_count += 1

    def remove_vertex(self, v):
        """
        Remove vertex v and all its incident edges.
        Raises VertexNotFoundError if v is not in the graph.
        """
        neighbors = self._adjacency_of(v)
        for w in neighbors:
            self.adjacency_list[w].discard(v)
        self._edge_count -= len(neighbors)
        del self.adjacency_list[v]

    def remove_edge(self, u, v):
        if not self.contains_edge(u, v):
            raise EdgeNotFoundError((u, v))
        self.adjacency_list[u].discard(v)
        self.adjacency_list[v].discard(u)
        self._edge_count -= 1

    def _adjacency_of(self, v):
        try:
            return self.adjacency_list[v]
        except KeyError:
            raise VertexNotFoundError(v) from None

    def neighbors(self, v):
        """
        Return the set of neighbors of vertex v.
        """
        return set(self._adjacency_of(v))

    def degree(self, v):
        return len(self._adjacency_of(v))

    def has_vertex(self, v):
        return v in self.adjacency_list

    def contains_edge(self, u, v):
        return u in self.adjacency_list and v in self.adjacency_list[u]

    def vertices(self):
        return list(self.adjacency_list)

    def edges(self):
        """
        Return every undirected edge once, as (u, v) where u was inserted before v.
        """
        seen = set()
        edges = []
        for u, neighbors in self.adjacency_list.items():
            for v in neighbors:
                if v not in seen:
                    edges.append((u, v))
            seen.add(u)
        return edges

    def vertex_count(self):
        return len(self.adjacency_list)

    def edge_count(self):
        return self._edge_count

    def density(self):
        n = self.vertex_count()
        if n <= 1:
            return 0.0
        return 2 * self._edge_count / (n * (n - 1))

    def vertex_with_max_degree(self, excluded=None):
        """
        Return (vertex, degree) of the vertex with the maximum degree, skipping the
        vertices in `excluded`. Ties go to the smallest vertex id.
        Returns (None, 0) when no vertex is eligible.
        """
        best_vertex = None
        best_degree = 0
        for v, neighbors in self.adjacency_list.items():
            if excluded is not None and v in excluded:
                continue
            degree = len(neighbors)
            if (best_vertex is None or degree > best_degree
                    or (degree == best_degree and v < best_vertex)):
                best_vertex = v
                best_degree = degree
        return best_vertex, best_degree

    def copy(self):
        """
        Deep copy: removals on the copy are never seen by the original.
        """
        clone = Graph()
        clone.adjacency_list = {v: set(neighbors) for v, neighbors in self.adjacency_list.items()}
        clone._edge_count = self._edge_count
        return clone

    def complement(self):
        """
        Same vertices; (u, v) is an edge iff u != v and (u, v) is not an edge here.
        """
        vertices = self.vertices()
        complement = Graph(vertices)
        all_vertices = set(vertices)
        for u in vertices:
            missing = all_vertices - self.adjacency_list[u]
            missing.discard(u)
            complement.adjacency_list[u] = missing
        complement._edge_count = len(vertices) * (len(vertices) - 1) // 2 - self._edge_count
        return complement

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self.adjacency_list == other.adjacency_list

    def __repr__(self):
        return f"Graph(order={self.vertex_count()}, size={self.edge_count()})"
