from cs2chat.app.main import main

raise SystemExit(main())
