"""Ensemble voting over metric verdicts."""

from .policy import MajorityPolicy, VotePolicy, WeightedFirstPolicy
from .tally import Tally, tally_votes

__all__ = ["MajorityPolicy", "Tally", "VotePolicy", "WeightedFirstPolicy", "tally_votes"]
