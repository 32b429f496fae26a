
from .command_runner import CommandRunnerPort
from .label_file_store import LabelFileStorePort
from .metrics_sink import MetricsSinkPort

__all__ = [
	"CommandRunnerPort",
	"LabelFileStorePort",
	"MetricsSinkPort",
]
