from bbox.cli import main

raise SystemExit(main())
