from snapgrid.main import main

raise SystemExit(main())
