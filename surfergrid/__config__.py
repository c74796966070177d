# -*- coding: utf-8 -*-
'''
    surfergrid.__config__
    ---------------------------

    Global variables used by surfergrid.

    :copyright: Copyright 2018-2025 surfergrid contributors.
    :license: GNU GPL v3.

'''

import logging

### === Fichiers === ###
default_format_tag = 'DSAA' # Surfer 6 text grid
### ================ ###

### === Format texte (DSAA) === ###
text_newline = '\r\n'
text_delimiter = ' ' # Fields must be space or tab delimited
text_values_per_line = 10 # Line break inserted after every 10th value of a row
no_data_text = '1.70141e+038' # Reserved blank token
### =========================== ###

### === Format binaire (DSBB) === ###
no_data_bits = 0x7effffee # Blank value as a raw 32-bit float pattern
### ============================= ###

### === Grille === ###
blank_value = 1.70141e+38 # Surfer's blanking value
min_grid_size = 2 # Surfer 10: the acceptable size is 2 to 32767
max_grid_size = 32767
### ============== ###

### === Logging === ###
log_level = logging.INFO
log_format = '%(name)s - %(levelname)s - %(message)s'
### =============== ###
