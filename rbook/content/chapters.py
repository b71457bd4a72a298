"""Chapter list and end-of-chapter quizzes, in book order."""
from __future__ import annotations

from rbook.models.quiz import Chapter, Quiz, QuizQuestion


def _quiz(title: str, chapter: int, records: list[dict]) -> Quiz:
    questions = tuple(QuizQuestion(r["prompt"], tuple(r["options"]), r["answer"]) for r in records)
    return Quiz(title=title, questions=questions, chapter=chapter)


GETTING_STARTED = _quiz(
    "Getting Started with R and RStudio",
    1,
    [
        {
            "prompt": "Which RStudio pane runs a command as soon as you press Enter?",
            "options": ["A) Environment", "B) Files", "C) Console", "D) Viewer"],
            "answer": "C",
        },
        {
            "prompt": "Which function installs a package from CRAN?",
            "options": ["A) library()", "B) install.packages()", "C) require.packages()", "D) load()"],
            "answer": "B",
        },
        {
            "prompt": "After a package is installed, which call makes its functions available in the current session?",
            "options": ["A) library(dplyr)", "B) install(dplyr)", "C) source(dplyr)", "D) open(dplyr)"],
            "answer": "A",
        },
        {
            "prompt": "Which character starts a comment in R code?",
            "options": ["A) //", "B) --", "C) %", "D) #"],
            "answer": "D",
        },
        {
            "prompt": "Which shortcut runs the current line of a script in RStudio on Windows?",
            "options": ["A) Ctrl+Enter", "B) Ctrl+S", "C) Alt+R", "D) Shift+Tab"],
            "answer": "A",
        },
        {
            "prompt": "Which function prints the current working directory?",
            "options": ["A) setwd()", "B) getwd()", "C) dir()", "D) pwd()"],
            "answer": "B",
        },
    ],
)

R_SYNTAX = _quiz(
    "R Syntax and Functions",
    2,
    [
        {
            "prompt": "Which operator is conventionally used for assignment in R?",
            "options": ["A) ==", "B) :=", "C) <-", "D) =>"],
            "answer": "C",
        },
        {
            "prompt": "What does x[2] return after x <- c(2, 4, 6)?",
            "options": ["A) 2", "B) 4", "C) 6", "D) An error"],
            "answer": "B",
        },
        {
            "prompt": "Which call returns the mean of x while ignoring missing values?",
            "options": ["A) mean(x)", "B) avg(x, na.rm = TRUE)", "C) mean(x, na = FALSE)", "D) mean(x, na.rm = TRUE)"],
            "answer": "D",
        },
        {
            "prompt": "How do you open the help page for the function sum?",
            "options": ["A) help.sum", "B) man sum", "C) ?sum", "D) sum??"],
            "answer": "C",
        },
        {
            "prompt": "What does function(x) x * 2 create?",
            "options": ["A) A numeric vector", "B) An anonymous function", "C) A list", "D) A formula"],
            "answer": "B",
        },
        {
            "prompt": "What does the native pipe do in x |> sqrt()?",
            "options": [
                "A) Assigns sqrt to x",
                "B) Compares x with sqrt",
                "C) Passes x as the first argument of sqrt()",
                "D) Squares x",
            ],
            "answer": "C",
        },
    ],
)

DATA_TYPES = _quiz(
    "Data Types and Structures",
    3,
    [
        {
            "prompt": "What does class(42L) return?",
            "options": ['A) "numeric"', 'B) "double"', 'C) "integer"', 'D) "character"'],
            "answer": "C",
        },
        {
            "prompt": 'What is the result of as.numeric("1,234")?',
            "options": ["A) 1234", "B) 1.234", "C) NA, with a coercion warning", "D) An error"],
            "answer": "C",
        },
        {
            "prompt": "Which structure holds equal-length columns of different types?",
            "options": ["A) Matrix", "B) Data frame", "C) Atomic vector", "D) Array"],
            "answer": "B",
        },
        {
            "prompt": 'What does c(1, "a", TRUE) produce?',
            "options": ["A) A list", "B) A numeric vector", "C) A logical vector", "D) A character vector"],
            "answer": "D",
        },
        {
            "prompt": "Which function returns the number of elements in a vector?",
            "options": ["A) length()", "B) nrow()", "C) size()", "D) count()"],
            "answer": "A",
        },
        {
            "prompt": "Which value marks a missing observation in a vector?",
            "options": ["A) NULL", "B) NaN", "C) NA", "D) 0"],
            "answer": "C",
        },
        {
            "prompt": 'What does factor(c("low", "high", "low")) store internally?',
            "options": [
                "A) Integer codes plus a set of levels",
                "B) Character strings",
                "C) Logical flags",
                "D) Double-precision numbers",
            ],
            "answer": "A",
        },
    ],
)

IMPORTING_DATA = _quiz(
    "Importing Data",
    4,
    [
        {
            "prompt": "Which readr function reads a comma-separated file into a tibble?",
            "options": ["A) read.table()", "B) read_csv()", "C) read_excel()", "D) fread_csv()"],
            "answer": "B",
        },
        {
            "prompt": "Which package provides read_excel()?",
            "options": ["A) readr", "B) haven", "C) readxl", "D) openxlsx"],
            "answer": "C",
        },
        {
            "prompt": "How do you read the second worksheet of sales.xlsx?",
            "options": [
                'A) read_excel("sales.xlsx", sheet = 2)',
                'B) read_excel("sales.xlsx")[2]',
                'C) read_excel("sales.xlsx", page = 2)',
                'D) read_sheet("sales.xlsx", 2)',
            ],
            "answer": "A",
        },
        {
            "prompt": 'Which readr function turns "1,234" into the number 1234?',
            "options": ["A) as.numeric()", "B) parse_integer()", "C) parse_character()", "D) parse_number()"],
            "answer": "D",
        },
        {
            "prompt": "Which package provides dbConnect() for talking to a SQL database?",
            "options": ["A) DBI", "B) dbplyr", "C) tidyr", "D) sqldf"],
            "answer": "A",
        },
        {
            "prompt": 'What does dbGetQuery(con, "SELECT * FROM sales") return?',
            "options": ["A) The SQL text", "B) A data frame of the result rows", "C) A new connection", "D) Nothing"],
            "answer": "B",
        },
    ],
)

DPLYR_VERBS = _quiz(
    "Data Manipulation with dplyr",
    5,
    [
        {
            "prompt": "Which verb keeps the rows that match a condition?",
            "options": ["A) select()", "B) filter()", "C) arrange()", "D) mutate()"],
            "answer": "B",
        },
        {
            "prompt": "Which verb adds new columns or modifies existing ones?",
            "options": ["A) mutate()", "B) summarise()", "C) rename()", "D) slice()"],
            "answer": "A",
        },
        {
            "prompt": "How do you sort a data frame by sales, largest first?",
            "options": [
                "A) arrange(sales, desc = TRUE)",
                "B) sort(sales)",
                "C) arrange(desc(sales))",
                "D) order_by(-sales)",
            ],
            "answer": "C",
        },
        {
            "prompt": "What does group_by(region) |> summarise(total = sum(sales)) return?",
            "options": [
                "A) One row per original row",
                "B) One row per region",
                "C) One column per region",
                "D) An ungrouped copy of the input",
            ],
            "answer": "B",
        },
        {
            "prompt": "Which verb picks columns by name?",
            "options": ["A) pick_cols()", "B) filter()", "C) pull()", "D) select()"],
            "answer": "D",
        },
        {
            "prompt": "What does n() return inside summarise()?",
            "options": [
                "A) The number of columns",
                "B) The number of rows in the current group",
                "C) The number of distinct values",
                "D) The number of missing values",
            ],
            "answer": "B",
        },
        {
            "prompt": "Which helper builds a column from several if/else conditions?",
            "options": ["A) case_when()", "B) switch_when()", "C) if_all()", "D) coalesce()"],
            "answer": "A",
        },
    ],
)

JOINS_AND_RESHAPING = _quiz(
    "Joining and Reshaping Data",
    6,
    [
        {
            "prompt": "Which join keeps every row of the left table?",
            "options": ["A) inner_join()", "B) left_join()", "C) semi_join()", "D) anti_join()"],
            "answer": "B",
        },
        {
            "prompt": "Which join returns the rows of x that have no match in y?",
            "options": ["A) anti_join()", "B) full_join()", "C) right_join()", "D) inner_join()"],
            "answer": "A",
        },
        {
            "prompt": "How do you join orders to customers when the keys are named cust_id and id?",
            "options": [
                'A) by = "cust_id"',
                "B) by = c(cust_id = id)",
                'C) by = c("cust_id" = "id")',
                "D) on = cust_id == id",
            ],
            "answer": "C",
        },
        {
            "prompt": "Which tidyr function turns columns into rows (wide to long)?",
            "options": ["A) pivot_wider()", "B) spread_out()", "C) gather_wide()", "D) pivot_longer()"],
            "answer": "D",
        },
        {
            "prompt": "In pivot_wider(), which argument names the column that supplies the new column names?",
            "options": ["A) values_from", "B) names_from", "C) cols", "D) names_to"],
            "answer": "B",
        },
        {
            "prompt": "Which join keeps every row from both tables?",
            "options": ["A) full_join()", "B) left_join()", "C) inner_join()", "D) semi_join()"],
            "answer": "A",
        },
    ],
)

CHAPTERS: tuple[Chapter, ...] = tuple(
    Chapter(number=q.chapter, title=q.title, quiz=q)
    for q in (GETTING_STARTED, R_SYNTAX, DATA_TYPES, IMPORTING_DATA, DPLYR_VERBS, JOINS_AND_RESHAPING)
)
