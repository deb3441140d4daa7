import logging
from dataclasses import dataclass
from typing import Optional

from tanhnet.errors import check_dimension


# ==================== CONFIGURATION ====================
@dataclass
class TrainingConfig:
    """Network shape and training parameters"""
    input_dim: int = 2
    hidden_dim: int = 3
    output_dim: int = 2
    learning_rate: float = 0.2
    epochs: int = 1
    log_every: int = 100
    random_state: Optional[int] = 42

    def __post_init__(self):
        for name in ('input_dim', 'hidden_dim', 'output_dim', 'epochs'):
            setattr(self, name, check_dimension(name, getattr(self, name)))
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.log_every <= 0:
            raise ValueError(f"log_every must be positive, got {self.log_every}")

    def to_dict(self):
        return dict(self.__dict__)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None):
    """Setup logging for training runs"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )
