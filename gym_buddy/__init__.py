"""
Workout catalog and session handoff core for the Gym Buddy workouts screen.
"""
