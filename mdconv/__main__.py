from mdconv.main import main

raise SystemExit(main())
