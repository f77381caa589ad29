from git_fuzzy import main

if __name__ == "__main__":
    main()
