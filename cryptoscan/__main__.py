from cryptoscan.cli import main

raise SystemExit(main())
