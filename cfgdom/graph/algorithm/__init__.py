""" Dominance algorithms, one stage per module. """
