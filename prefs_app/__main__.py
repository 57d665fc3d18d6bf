from prefs_app.launcher import main

main()
