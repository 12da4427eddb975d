"""graphwalk — Eulerian and Hamiltonian circuit search over undirected graphs."""

__version__ = "0.1.0"
