"""
The MODEL layer contains pure data structures describing a simulation.
It has NO knowledge of the solvers or of any visualization.
"""
