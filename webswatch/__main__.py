# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

from webswatch.cli import main

raise SystemExit(main())
