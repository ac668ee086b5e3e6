"""ByteCrawl: a dungeon crawler played inside an in-memory file system.

Players move around with ``cd``/``ls``, read files with ``cat``, and
run the programs they find with ``./name``.  The file system engine
lives in ``bytecrawl.fs``; everything else is the game built on it.
"""
