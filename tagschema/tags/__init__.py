from .parse_tag import TagOptions as TagOptions
from .parse_tag import has_option as has_option
from .parse_tag import options_with_prefix as options_with_prefix
from .parse_tag import parse_tag as parse_tag
from .parse_tag import split_tag as split_tag
from .tag import Tag as Tag
