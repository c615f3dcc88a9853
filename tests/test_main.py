from main import main


class TestMain:

    def test_output(self, capsys):
        main()
        assert ['8', '55', 'Result: 4'] == \
               capsys.readouterr().out.splitlines()

    def test_absent_branch(self, capsys, monkeypatch):
        import main as program
        monkeypatch.setattr(program, 'CALCULATE_X', 0)
        program.main()
        assert ['8', '55', 'Error: Division by zero'] == \
               capsys.readouterr().out.splitlines()
