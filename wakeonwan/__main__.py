from wakeonwan.main import main

raise SystemExit(main())
