"""Numerical and simulation-wide constants."""

# Numerical constants
DEG_TO_RAD = 0.0174532925
TAU = 6.283185307
PI = 3.141592654
EPSILON = 1e-8

# Chasing automaton
CHASING_AUTOMATON_MAX_SPEED = 380.0
CHASING_AUTOMATON_MASS = 1.0
CHASING_AUTOMATON_RADIUS = 20.0
GHOST_TEXTURE = "ghost.1.png"

# Animal
ANIMAL_MAX_SPEED = 80.0
ANIMAL_MASS = 1.0
ANIMAL_RADIUS = 20.0
ANIMAL_VIEW_RANGE = 60 * DEG_TO_RAD
ANIMAL_VIEW_DISTANCE = 300.0
ANIMAL_TEXTURE = "scorpion.png"
ANIMAL_RANDOM_WALK_JITTER = 10.0
ANIMAL_RANDOM_WALK_RADIUS = 50.0
ANIMAL_RANDOM_WALK_DISTANCE = 160.0


class Titles:
    """Titles of the statistics graphs."""

    PPS = "Predator Prey Simulation"
    NEURONAL = "Neuronal Simulation"
    GENERAL = "General"
    TEST = "Test"
    SCORPIONS = "Scorpions"
    GERBILS = "Gerbils"
    FOOD = "Food sources"
    WAVES = "Waves"