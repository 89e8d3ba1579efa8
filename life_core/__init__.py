"""
bitlife core Python package.

The whole board is a single Python int (one bit per cell) and a generation
is computed with shifts and bitwise logic over that int. Every function
takes and returns the textual representation "<cols>x<rows>/<hex>".
Modules:
- board.py: Game, Size, Coord
- codec.py: serialize / unserialize
- cells.py: get, toggle, iter_cells
- step.py: next_generation
- text.py: to_string / from_string (ASCII pictures)
- params.py: route parameters and the example board
- cli.py: command line driver
"""
