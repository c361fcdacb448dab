from gridslide.engine.moves.moves import Direction, Move, describe_move, describe_path

__all__ = ["Direction", "Move", "describe_move", "describe_path"]
