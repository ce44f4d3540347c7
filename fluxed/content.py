"""Bundled read-only learning content: quiz questions, curriculum and library."""

QUESTIONS = [
	# Math
	{"id": "m1", "text": "What shape has 3 sides?", "options": ["Square", "Circle", "Triangle", "Rectangle"], "correct_answer_index": 2, "subject": "Math", "grade": 1, "difficulty": "easy", "hint": "Think of a slice of pizza! 🍕"},
	{"id": "m2", "text": "What is 5 + 3?", "options": ["7", "8", "9", "10"], "correct_answer_index": 1, "subject": "Math", "grade": 1, "difficulty": "easy", "hint": "Count your fingers! 🖐️"},
	{"id": "m3", "text": "Which number comes after 19?", "options": ["18", "20", "21", "22"], "correct_answer_index": 1, "subject": "Math", "grade": 1, "difficulty": "easy"},
	{"id": "m4", "text": "How many corners does a square have?", "options": ["3", "4", "5", "6"], "correct_answer_index": 1, "subject": "Math", "grade": 1, "difficulty": "easy"},
	{"id": "m5", "text": "What is 10 - 4?", "options": ["5", "6", "7", "8"], "correct_answer_index": 1, "subject": "Math", "grade": 2, "difficulty": "medium"},
	{"id": "m6", "text": "Which is the largest number?", "options": ["45", "54", "39", "51"], "correct_answer_index": 1, "subject": "Math", "grade": 2, "difficulty": "medium"},
	{"id": "m7", "text": "What is 2 x 5?", "options": ["7", "10", "12", "15"], "correct_answer_index": 1, "subject": "Math", "grade": 2, "difficulty": "medium"},
	{"id": "m8", "text": "A clock shows 3:00. Where is the big hand?", "options": ["At 3", "At 6", "At 9", "At 12"], "correct_answer_index": 3, "subject": "Math", "grade": 2, "difficulty": "medium"},
	{"id": "m9", "text": "What is 7 x 8?", "options": ["54", "56", "58", "64"], "correct_answer_index": 1, "subject": "Math", "grade": 3, "difficulty": "hard", "hint": "7 x 7 is 49. Add one more 7!"},
	{"id": "m10", "text": "What is half of 90?", "options": ["40", "45", "50", "35"], "correct_answer_index": 1, "subject": "Math", "grade": 3, "difficulty": "hard"},
	{"id": "m11", "text": "How many minutes are there in 2 hours?", "options": ["100", "120", "140", "200"], "correct_answer_index": 1, "subject": "Math", "grade": 3, "difficulty": "hard"},

	# EVS
	{"id": "e1", "text": "Which animal gives us milk?", "options": ["Lion", "Cow", "Dog", "Cat"], "correct_answer_index": 1, "subject": "EVS", "grade": 1, "difficulty": "easy", "hint": "It says Mooo! 🐄"},
	{"id": "e2", "text": "Which part of the plant is under the ground?", "options": ["Leaf", "Flower", "Root", "Stem"], "correct_answer_index": 2, "subject": "EVS", "grade": 1, "difficulty": "easy"},
	{"id": "e3", "text": "What do we use to see things?", "options": ["Ears", "Nose", "Eyes", "Hands"], "correct_answer_index": 2, "subject": "EVS", "grade": 1, "difficulty": "easy"},
	{"id": "e4", "text": "Which is a fruit?", "options": ["Potato", "Apple", "Carrot", "Onion"], "correct_answer_index": 1, "subject": "EVS", "grade": 1, "difficulty": "easy"},
	{"id": "e5", "text": "Which animal can fly?", "options": ["Elephant", "Bird", "Fish", "Rabbit"], "correct_answer_index": 1, "subject": "EVS", "grade": 1, "difficulty": "easy"},
	{"id": "e6", "text": "What do plants need to grow?", "options": ["Chocolate", "Water and Sunlight", "Toys", "Milk"], "correct_answer_index": 1, "subject": "EVS", "grade": 2, "difficulty": "medium"},
	{"id": "e7", "text": "Which is a living thing?", "options": ["Stone", "Tree", "Table", "Car"], "correct_answer_index": 1, "subject": "EVS", "grade": 2, "difficulty": "medium"},
	{"id": "e8", "text": "How many sense organs do we have?", "options": ["3", "4", "5", "6"], "correct_answer_index": 2, "subject": "EVS", "grade": 2, "difficulty": "medium"},
	{"id": "e9", "text": "Which gas do plants take in from the air?", "options": ["Oxygen", "Carbon dioxide", "Nitrogen", "Helium"], "correct_answer_index": 1, "subject": "EVS", "grade": 3, "difficulty": "hard", "hint": "We breathe it out! 🌬️"},
	{"id": "e10", "text": "Which of these animals is a herbivore?", "options": ["Tiger", "Goat", "Wolf", "Eagle"], "correct_answer_index": 1, "subject": "EVS", "grade": 3, "difficulty": "hard"},
	{"id": "e11", "text": "Water turns into ice when it is...", "options": ["Heated", "Frozen", "Boiled", "Stirred"], "correct_answer_index": 1, "subject": "EVS", "grade": 3, "difficulty": "hard"},

	# English
	{"id": "en1", "text": "Which is a vowel?", "options": ["B", "C", "E", "D"], "correct_answer_index": 2, "subject": "English", "grade": 1, "difficulty": "easy", "hint": "A, E, I, O, U are vowels!"},
	{"id": "en2", "text": "What is the opposite of \"Big\"?", "options": ["Tall", "Small", "Long", "Heavy"], "correct_answer_index": 1, "subject": "English", "grade": 1, "difficulty": "easy"},
	{"id": "en3", "text": "Choose the correct spelling:", "options": ["Appel", "Apple", "Aple", "Appal"], "correct_answer_index": 1, "subject": "English", "grade": 1, "difficulty": "easy"},
	{"id": "en4", "text": "A ____ barked at the stranger.", "options": ["Cat", "Dog", "Cow", "Bird"], "correct_answer_index": 1, "subject": "English", "grade": 1, "difficulty": "easy"},
	{"id": "en5", "text": "Which word is a naming word (Noun)?", "options": ["Run", "Happy", "Rahul", "Fast"], "correct_answer_index": 2, "subject": "English", "grade": 2, "difficulty": "medium"},
	{"id": "en6", "text": "Plural of \"Cat\" is:", "options": ["Cats", "Cates", "Caties", "Cating"], "correct_answer_index": 0, "subject": "English", "grade": 2, "difficulty": "medium"},
	{"id": "en7", "text": "Identify the action word (Verb):", "options": ["Apple", "Book", "Jump", "Red"], "correct_answer_index": 2, "subject": "English", "grade": 2, "difficulty": "medium"},
	{"id": "en8", "text": "Which sentence is correct?", "options": ["I is happy.", "I am happy.", "I are happy.", "I be happy."], "correct_answer_index": 1, "subject": "English", "grade": 2, "difficulty": "medium"},
	{"id": "en9", "text": "Past tense of \"go\" is:", "options": ["Goed", "Went", "Gone", "Going"], "correct_answer_index": 1, "subject": "English", "grade": 3, "difficulty": "hard", "hint": "Yesterday I ____ to school."},
	{"id": "en10", "text": "Which word describes a noun (Adjective)?", "options": ["Quickly", "Beautiful", "Sing", "Under"], "correct_answer_index": 1, "subject": "English", "grade": 3, "difficulty": "hard"},
	{"id": "en11", "text": "Choose the word with the same meaning as \"happy\":", "options": ["Sad", "Angry", "Joyful", "Tired"], "correct_answer_index": 2, "subject": "English", "grade": 3, "difficulty": "hard"},
]

LIBRARY_PDFS = [
	{"id": "p1", "title": "Math-Magic Class 1", "url": "https://ncert.nic.in/textbook/pdf/aehh101.pdf", "grade": 1, "subject": "Math"},
	{"id": "p2", "title": "Marigold Class 1", "url": "https://ncert.nic.in/textbook/pdf/aeen101.pdf", "grade": 1, "subject": "English"},
	{"id": "p3", "title": "Looking Around Class 3", "url": "https://ncert.nic.in/textbook/pdf/ceap101.pdf", "grade": 3, "subject": "EVS"},
	{"id": "p4", "title": "Math-Magic Class 2", "url": "https://ncert.nic.in/textbook/pdf/behh101.pdf", "grade": 2, "subject": "Math"},
	{"id": "p5", "title": "Raindrops Class 2", "url": "https://ncert.nic.in/textbook/pdf/been101.pdf", "grade": 2, "subject": "English"},
	{"id": "p6", "title": "Rimjhim Class 1 (Hindi)", "url": "https://ncert.nic.in/textbook/pdf/ahhn101.pdf", "grade": 1, "subject": "Hindi"},
	{"id": "p7", "title": "Environmental Studies Class 4", "url": "https://ncert.nic.in/textbook/pdf/deap101.pdf", "grade": 4, "subject": "EVS"},
	{"id": "p8", "title": "Mathematics Class 5", "url": "https://ncert.nic.in/textbook/pdf/eehh101.pdf", "grade": 5, "subject": "Math"},
	{"id": "p9", "title": "English Marigold Class 5", "url": "https://ncert.nic.in/textbook/pdf/eeen101.pdf", "grade": 5, "subject": "English"},
	{"id": "p10", "title": "Science Class 6", "url": "https://ncert.nic.in/textbook/pdf/fesc101.pdf", "grade": 6, "subject": "Science"},
]

CURRICULUM = {
	"Math": [
		{
			"id": "c1",
			"name": "Numbers & Counting",
			"pdfs": [
				{"name": "NCERT Chapter 1", "desc": "Official Concept Theory", "url": "https://ncert.nic.in/textbook/pdf/aehh101.pdf"},
				{"name": "FluxED Reference", "desc": "Visual Learning Guide", "url": "#"},
			],
			"topics": [
				{
					"id": "t1",
					"name": "Numbers 1-10",
					"videos": [
						{"title": "Counting 1-10 for Kids", "platform": "YouTube", "duration": "5:00", "url": "https://www.youtube.com/results?search_query=counting+1-10+for+kids", "rating": 4.8, "total_ratings": 1250, "tags": ["Top Rated", "Beginner Friendly"]},
						{"title": "Number Recognition", "platform": "FluxED", "duration": "3:20", "url": "#", "rating": 4.5, "total_ratings": 850, "tags": ["Short Duration"]},
					],
					"questions": [
						{"text": "What comes after 5?", "options": ["4", "6", "7", "8"], "correct_answer": 1, "explanation": "6 comes immediately after 5."},
						{"text": "How many fingers do you have on one hand?", "options": ["3", "4", "5", "10"], "correct_answer": 2, "explanation": "Most people have 5 fingers on one hand."},
					],
				},
				{
					"id": "t2",
					"name": "Addition Basics",
					"videos": [
						{"title": "Intro to Addition", "platform": "YouTube", "duration": "4:30", "url": "https://www.youtube.com/results?search_query=addition+basics+for+kids", "rating": 4.7, "total_ratings": 2100, "tags": ["Top Rated"]},
					],
					"questions": [
						{"text": "2 + 2 = ?", "options": ["3", "4", "5", "6"], "correct_answer": 1, "explanation": "Adding 2 and 2 gives 4."},
					],
				},
			],
		},
		{
			"id": "c2",
			"name": "Shapes & Space",
			"pdfs": [
				{"name": "NCERT Chapter 2", "desc": "Shapes and Designs", "url": "https://ncert.nic.in/textbook/pdf/aehh102.pdf"},
			],
			"topics": [
				{
					"id": "t3",
					"name": "Basic Shapes",
					"videos": [
						{"title": "Shapes Song", "platform": "YouTube", "duration": "3:15", "url": "https://www.youtube.com/results?search_query=shapes+song+for+kids", "rating": 4.9, "total_ratings": 5400, "tags": ["Top Rated", "Short Duration"]},
					],
					"questions": [
						{"text": "Which shape has no corners?", "options": ["Square", "Triangle", "Circle", "Rectangle"], "correct_answer": 2, "explanation": "A circle is round and has no corners."},
					],
				},
			],
		},
	],
	"English": [
		{
			"id": "c3",
			"name": "Alphabet Fun",
			"pdfs": [
				{"name": "NCERT Marigold Ch 1", "desc": "A Happy Child", "url": "https://ncert.nic.in/textbook/pdf/aeen101.pdf"},
			],
			"topics": [
				{
					"id": "t4",
					"name": "Vowels & Consonants",
					"videos": [
						{"title": "The Vowel Song", "platform": "YouTube", "duration": "6:00", "url": "https://www.youtube.com/results?search_query=vowels+and+consonants+for+kids", "rating": 4.6, "total_ratings": 3200, "tags": ["Beginner Friendly"]},
					],
					"questions": [
						{"text": "Which of these is a vowel?", "options": ["B", "C", "E", "D"], "correct_answer": 2, "explanation": "E is one of the five vowels (A, E, I, O, U)."},
					],
				},
			],
		},
	],
	"EVS": [
		{
			"id": "c4",
			"name": "My Body",
			"pdfs": [
				{"name": "NCERT EVS Ch 1", "desc": "Poonam's Day Out", "url": "https://ncert.nic.in/textbook/pdf/ceap101.pdf"},
			],
			"topics": [
				{
					"id": "t5",
					"name": "Sense Organs",
					"videos": [
						{"title": "Our 5 Senses", "platform": "YouTube", "duration": "5:45", "url": "https://www.youtube.com/results?search_query=5+senses+for+kids", "rating": 4.7, "total_ratings": 1800, "tags": ["Top Rated"]},
					],
					"questions": [
						{"text": "Which organ do we use to smell?", "options": ["Eyes", "Ears", "Nose", "Tongue"], "correct_answer": 2, "explanation": "We use our nose to smell things."},
					],
				},
			],
		},
	],
}
