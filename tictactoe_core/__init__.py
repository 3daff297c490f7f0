"""
Tic-tac-toe core Python package.

Pure game logic and the session state machine, kept apart from the Flask
front end so both can be tested on their own.
Modules:
- board.py: cells, winning lines, win/draw detection, turn alternation
- tiebreak.py: die-roll decision for the starting player
- snapshot.py: Snapshot value and its JSON mapping
- session.py: GameSession
- storage.py: snapshot files on disk
"""
