"""Search algorithms: weight extraction, branch evaluation, aggregation, BFS."""
