from fifteen.engine.shuffler.shuffler import DEFAULT_SHUFFLE_MOVES, DIRECTIONS, Shuffler

__all__ = ["DEFAULT_SHUFFLE_MOVES", "DIRECTIONS", "Shuffler"]
