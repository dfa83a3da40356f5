#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the koblitz package."

name = "koblitz"
__version__ = "2022.5.3"
__author__ = "The koblitz developers"
__author_email__ = "devs@koblitz.dev"
__copyright__ = "Copyright (C) 2017-2022 The koblitz developers"
__license__ = "MIT License"
