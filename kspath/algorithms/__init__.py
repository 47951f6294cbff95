"""Path-finding algorithms: SPF search and Yen's k-shortest paths."""
