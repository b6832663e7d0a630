from triplegen.cli import main

raise SystemExit(main())
