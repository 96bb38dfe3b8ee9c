from .installer import INSTALL_MESSAGE_GROUP, INSTALL_QUEUE, Installer, partition
from .types import InstallOptions, PartitionResult, RunInstall, RunLoop

__all__ = [
    "Installer",
    "partition",
    "INSTALL_QUEUE",
    "INSTALL_MESSAGE_GROUP",
    "InstallOptions",
    "PartitionResult",
    "RunInstall",
    "RunLoop",
]
