# -*- coding: utf-8 -*-
import sys

from .game import main

sys.exit(main())
