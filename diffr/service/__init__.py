from diffr.service.check import *
from diffr.service.load import *
from diffr.service.show import *
