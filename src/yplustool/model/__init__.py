"""
The MODEL layer contains pure data structures and the calculation.
It has NO knowledge of the GUI (Qt).
"""
