from .load import LoadPhase  # noqa: F401
from .filter import ChannelFilterPhase, ProgrammeFilterPhase  # noqa: F401
from .clump import ClumpRepairPhase, clump_groups  # noqa: F401
from .prune import ProgrammePrunePhase  # noqa: F401
