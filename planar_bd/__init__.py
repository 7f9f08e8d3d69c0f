"""
Planar arm behaviour descriptors.

Computes low-dimensional, normalised behaviour descriptors from the pose of
a simulated planar articulated arm, for use by quality-diversity and
novelty-search algorithms that characterise behaviours by a fixed-size
feature vector.

Modules:
    descriptors: The descriptor family (positional, polar, joint-chain
        angles, command sums) and a name-based factory.
    sim: A reference kinematic planar arm, open-loop controller, and
        Gymnasium environment that serve as descriptor collaborators.
    utils: Shared constants and numeric helpers.
"""

__version__ = "0.1.0"
