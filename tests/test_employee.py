from algokit.employee import Employee


def test_info_lists_fields():
    employee = Employee("mandeep", "amazon", 19)
    assert employee.info() == "name--mandeep\ncompany--amazon\nage--19"


def test_renaming_changes_info():
    employee = Employee("mandeep", "amazon", 19)
    employee.name = "jassu"
    assert employee.info().splitlines()[0] == "name--jassu"
    assert employee.info().splitlines()[1:] == ["company--amazon", "age--19"]