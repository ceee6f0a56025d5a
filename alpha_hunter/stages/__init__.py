# Pipeline stages module
from .stage1_parsing import ParsingStage
from .stage2_cleaning import CleaningStage
from .stage3_filters import AlphaFilterStage
from .stage4_scoring import PriorityScoringStage
from .stage5_aggregation import AggregationStage
from .stage6_verification import VerificationStage
