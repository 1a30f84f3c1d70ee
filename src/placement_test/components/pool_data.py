# -*- coding: utf-8 -*-

"""
Canned placement test content.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/pool_data.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Question pools per proficiency group

from typing import Dict, List, Tuple

# (stem, options, correct_index)
Row = Tuple[str, Tuple[str, str, str, str], int]

GROUP_POOL_ROWS: Dict[str, List[Row]] = {
    "domestic_primary": [
        ("Choose the English word for the fruit 'apple'.", ("apple", "banana", "orange", "grape"), 0),
        ("Choose the correct sentence.", ("We are students.", "We is students.", "We am student.", "We are student."), 0),
        ("Which word is a colour?", ("desk", "red", "run", "happy"), 1),
        ("Choose the right word: I ___ a cat.", ("has", "is", "have", "am"), 2),
        ("Which animal can fly?", ("fish", "dog", "horse", "bird"), 3),
    ],
    "domestic_middle": [
        ("Choose the past tense of 'go'.", ("goes", "went", "going", "gone"), 1),
        ("Choose the correct preposition: I am ___ school.", ("in", "on", "at", "by"), 2),
        ("Choose the correct sentence.", ("She don't like milk.", "She doesn't like milk.", "She doesn't likes milk.", "She don't likes milk."), 1),
        ("Choose the question for: 'I get up at seven.'", ("What time do you get up?", "What time you get up?", "What time are you get up?", "What time does you get up?"), 0),
        ("Choose a synonym of 'big'.", ("small", "large", "short", "thin"), 1),
    ],
    "domestic_high": [
        ("If I ___ you, I would accept the offer.", ("am", "was", "were", "be"), 2),
        ("The bridge ___ by the workers last year.", ("built", "was built", "has built", "is building"), 1),
        ("Choose the word closest in meaning to 'reluctant'.", ("unwilling", "eager", "careless", "honest"), 0),
        ("Not until midnight ___ home.", ("he came", "did he come", "he did come", "came he"), 1),
        ("She is the girl ___ father is a doctor.", ("who", "whom", "which", "whose"), 3),
    ],
    "domestic_college": [
        ("The new policy had a profound ___ on the economy.", ("affect", "effect", "effort", "afford"), 1),
        ("Choose the word closest in meaning to 'abundant'.", ("scarce", "plentiful", "fragile", "hostile"), 1),
        ("It is essential that every student ___ the exam.", ("takes", "took", "take", "taking"), 2),
        ("He apologized ___ being late.", ("for", "to", "with", "of"), 0),
        ("___ the heavy rain, the match went ahead.", ("Because", "Although", "In spite of", "Despite of"), 2),
    ],
    "domestic_exam": [
        ("This result is ___ with our expectations.", ("consistent", "confuse", "consist", "consistency"), 0),
        ("Choose the best paraphrase: 'The policy was implemented quickly.'", ("The policy was carried out rapidly.", "The policy was done fastly.", "The policy was implement quick.", "The policy was making quickly."), 0),
        ("Choose the word closest in meaning to 'ubiquitous'.", ("rare", "everywhere", "ancient", "hidden"), 1),
        ("Had the data been verified, the error ___.", ("would be avoided", "would have been avoided", "will be avoided", "had avoided"), 1),
        ("The author's argument is ___ by weak evidence.", ("undermined", "underlined", "understood", "undertaken"), 0),
    ],
    "domestic_daily": [
        ("A friend says 'Thank you!'. You answer:", ("You're welcome.", "Yes, please.", "I'm fine.", "Goodbye."), 0),
        ("How do you ask for the price?", ("How old is it?", "How much is it?", "How many is it?", "How long is it?"), 1),
        ("Choose the polite request.", ("Give me water.", "Water now.", "Could I have some water, please?", "I want water you."), 2),
        ("At a restaurant, the waiter asks 'Are you ready to order?'. You answer:", ("Yes, I'd like the soup.", "Yes, I'm ready to go.", "No, I ordered.", "I'm hungry yesterday."), 0),
        ("Choose the correct reply to 'How are you?'", ("I'm twenty.", "I'm from Beijing.", "I'm a teacher.", "I'm fine, thanks."), 3),
    ],
    "overseas_cambridge": [
        ("I've lived here ___ 2015.", ("for", "since", "from", "during"), 1),
        ("She asked me where ___.", ("did I live", "I lived", "do I live", "I did live"), 1),
        ("Choose the word closest in meaning to 'purchase'.", ("sell", "borrow", "buy", "lend"), 2),
        ("By the time we arrived, the film ___.", ("started", "has started", "had started", "starts"), 2),
        ("He's used to ___ early.", ("get up", "getting up", "got up", "gets up"), 1),
    ],
    "overseas_cefr": [
        ("My brother ___ football every Saturday.", ("play", "plays", "playing", "is play"), 1),
        ("There isn't ___ milk left.", ("some", "many", "any", "a"), 2),
        ("Choose the word closest in meaning to 'tiny'.", ("huge", "very small", "bright", "noisy"), 1),
        ("If it rains tomorrow, we ___ at home.", ("stay", "stayed", "will stay", "would stay"), 2),
        ("The report must ___ by Friday.", ("finish", "be finished", "finished", "be finishing"), 1),
    ],
    "overseas_exam": [
        ("The findings ___ the need for further research.", ("underscore", "undergo", "underwrite", "underpay"), 0),
        ("Choose the word closest in meaning to 'mitigate'.", ("worsen", "alleviate", "ignore", "measure"), 1),
        ("___ its limitations, the study offers valuable insights.", ("Because of", "Owing to", "Notwithstanding", "Thanks to"), 2),
        ("The phenomenon is ___ to explain with current models.", ("difficulty", "difficult", "difficultly", "difficulties"), 1),
        ("Choose the best linking phrase: 'Costs rose; ___, profits fell.'", ("consequently", "meanwhile not", "despite", "whereas"), 0),
    ],
}

GENERIC_POOL_ROWS: List[Row] = [
    ("Choose the English word for 'book'.", ("pen", "book", "bag", "desk"), 1),
    ("Choose the correct sentence.", ("He go to school.", "He goes to school.", "He going to school.", "He gone to school."), 1),
    ("Choose the opposite of 'hot'.", ("warm", "cold", "wet", "dry"), 1),
    ("Choose the right word: They ___ playing now.", ("is", "am", "are", "be"), 2),
    ("Choose the plural of 'child'.", ("childs", "childes", "children", "childrens"), 2),
]
