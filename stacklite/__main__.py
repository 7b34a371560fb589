from __future__ import annotations

from stacklite.main import main

raise SystemExit(main())
