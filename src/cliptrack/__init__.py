"""cliptrack - timeline clip and caption alignment model.

Represent clips on a virtual timeline apart from their source media,
resolve what plays at any playhead time, and place transcribed captions
(timed against the untrimmed source) onto trimmed clips.
"""
