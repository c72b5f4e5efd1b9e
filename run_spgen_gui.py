from spgen.gui_qt import main

if __name__ == "__main__":
    main()
