from .env import Env as Env
from .load_env import get_env as get_env
from .load_env import load_env as load_env
