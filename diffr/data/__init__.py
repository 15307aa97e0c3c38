from diffr.data.change import *
from diffr.data.change_set import *
from diffr.data.config import *
from diffr.data.error import *
from diffr.data.match_type import *
