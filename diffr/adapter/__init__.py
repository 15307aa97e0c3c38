from diffr.adapter import config, diff_file, fs
